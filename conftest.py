import pytest
from tomdoc.needle import needle
from tomdoc.test_utils import WorkspaceFactory


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # A clean project directory that is also the working directory.
    factory = WorkspaceFactory(tmp_path)
    monkeypatch.chdir(tmp_path)
    return factory


@pytest.fixture(autouse=True)
def reset_needle_project_root():
    # The CLI points the global catalog at the current project.
    yield
    needle.set_project_root(None)
