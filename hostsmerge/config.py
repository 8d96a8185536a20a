# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

from .error import ConfigurationError, MissingDependencyError

_os = __import__("os")
_sys = __import__("sys")
_log = __import__("logging").getLogger(__name__)

# 用户主目录
USER_HOME = _os.getenv("HOME", "/home/server")

# 白名单与黑名单文件路径，每行一个域名，支持 # 注释
WHITELIST_PATH = None
BLACKLIST_PATH = None

# 远程屏蔽列表源
# SOURCES_HOSTS_FORMAT 为 hosts 文件格式的源，如 "0.0.0.0 ads.example.com"
# SOURCES_DOMAINS_ONLY 为仅包含域名的源，每行一个域名
SOURCES_HOSTS_FORMAT = []
SOURCES_DOMAINS_ONLY = []

# 合并结果输出路径及文件权限，权限可以为整数（如 0o644）或八进制字符串（如 "644"）
RESULT_PATH = None
RESULT_PERMISSIONS = 0o644

# 下载重试次数及超时时间，单位为秒
RETRY_NUM = 5
TIMEOUT = 300

# 下载时使用的代理，如 http://127.0.0.1:8080 或 socks5://127.0.0.1:1080
PROXY = None

# 检查域名是否可解析时使用的 DNS 服务器，为空时使用系统配置
NAMESERVERS = None
DNS_TIMEOUT = 5

# 域名解析结果缓存
DNS_CACHE_SIZE = 1024
DNS_CACHE_TTL = 60 * 10

# 日志相关配置
LOGLEVEL = "INFO"
LOG_FILE = _os.getenv("HOSTSMERGE_LOG_FILE")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
ENABLE_ROTATE_LOG = False
LOG_MAXSIZE = 20 * 1024 * 1024
LOG_BACKUPS = 10

# 配置文件目录
_CONFIG_DIRS = [
    '/etc/hostsmerge/',
    '/usr/local/etc/hostsmerge',
    _os.path.join(USER_HOME, '.local', 'etc', 'hostsmerge'),
    _os.path.join(USER_HOME, '.config', 'hostsmerge'),
    _os.path.join(_os.getcwd(), 'config')
]

# 必须配置的项
_REQUIRED_KEYS = ["WHITELIST_PATH", "BLACKLIST_PATH", "RESULT_PATH"]

# 标记配置是否已被加载过
_HAS_BEEN_LOADED = False


def _get_default_config_paths(config_dirs=None):
    common_config_suffixes = [".py", ".yml", ".yaml"]  # 公共的配置文件后缀
    local_config_suffixes = [                          # 本地定制化配置文件后缀
        ".local" + item for item in common_config_suffixes
    ]
    suffixes = [
        suffix
        for item in zip(common_config_suffixes, local_config_suffixes)
        for suffix in item
    ]
    return [
        _os.path.join(config_dir, f"hostsmerge{suffix}")
        for config_dir in (config_dirs or _CONFIG_DIRS)
        for suffix in suffixes
        if config_dir and _os.path.exists(config_dir)
    ]


def _parse_yaml_config_file(path):
    try:
        import yaml
    except ImportError:
        raise MissingDependencyError(
            f"got a yaml config file '{path}', but no yaml package"
        )

    try:
        from yaml import CLoader as Loader
    except ImportError:
        from yaml import Loader

    with open(path, encoding="utf-8") as fp:
        content = fp.read()
    _config = yaml.load(content, Loader=Loader)
    if not _config:
        return
    if not isinstance(_config, dict):
        raise ConfigurationError(f"invalid yaml config file '{path}'")
    _config = {key.upper(): val for key, val in _config.items()}

    # 未加引号的权限值（如 644、0644）会被解析为整数，这里取回原始文本按八进制处理
    if isinstance(_config.get("RESULT_PERMISSIONS"), int):
        node = yaml.compose(content, Loader=Loader)
        for key_node, val_node in node.value:
            if str(key_node.value).upper() == "RESULT_PERMISSIONS":
                _config["RESULT_PERMISSIONS"] = val_node.value

    globals().update(_config)


def _parse_config_file(path):
    _, fileext = _os.path.splitext(path)
    if fileext in {".yml", ".yaml"}:
        _parse_yaml_config_file(path)
    else:
        with open(path, encoding="utf-8") as fp:
            code = compile(fp.read(), path, "exec")
        exec(code, globals(), globals())


def load_config(path=None, reset=False):
    global _HAS_BEEN_LOADED
    reset = bool(reset or path)
    if _HAS_BEEN_LOADED and not reset:
        return _sys.modules[__name__]

    if path and not _os.path.exists(path):
        raise ConfigurationError(f"config path '{path}' does not exist")

    config_dirs = list(_CONFIG_DIRS)
    if path and _os.path.isdir(path):
        config_dirs.append(path)
    env_path = _os.getenv("HOSTSMERGE_CONFIG_PATH")
    if env_path and _os.path.isdir(env_path):
        config_dirs.append(env_path)

    config_paths = _get_default_config_paths(config_dirs)
    if path and _os.path.isfile(path):
        config_paths.append(path)
    if env_path and _os.path.isfile(env_path):
        config_paths.append(env_path)

    for cfg_path in config_paths:
        if not cfg_path or not _os.path.exists(cfg_path):
            continue
        _log.debug("Load config: %s", cfg_path)
        _parse_config_file(cfg_path)

    _HAS_BEEN_LOADED = True
    return _sys.modules[__name__]


def check_config(**overrides):
    """检查必须的配置项，缺失时抛出 ConfigurationError

    overrides 为命令行等指定的配置，优先于配置文件
    """
    missing = [
        key for key in _REQUIRED_KEYS
        if not (overrides.get(key) or globals().get(key))
    ]
    if missing:
        raise ConfigurationError(
            "missing configuration: {}".format(", ".join(missing))
        )
    if not (SOURCES_HOSTS_FORMAT or SOURCES_DOMAINS_ONLY):
        _log.warning("No sources configured")
