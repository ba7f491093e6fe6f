from tomdoc.cli.main import app

app(prog_name="tomdoc")
