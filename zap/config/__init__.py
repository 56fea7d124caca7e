from .zap_config import ZapConfig, config_path, load_config, log_path
