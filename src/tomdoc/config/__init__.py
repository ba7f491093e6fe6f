from .loader import TomdocConfig, config_from_dict, load_config_from_path

__all__ = ["TomdocConfig", "config_from_dict", "load_config_from_path"]
