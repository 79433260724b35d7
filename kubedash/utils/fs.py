import json
import os
import yaml
from typing import Union, List, Dict

from kubedash.models.config import ConfigFile
from kubedash.utils.logger import get_logger

logger = get_logger(__name__)


def read_config_from_file(file_path: str = None, kubeconfig: str = None) -> ConfigFile:
    """Read config file from local
    Args:
        file_path: Path to config file. Defaults are used when not given.
        kubeconfig: Path to kubeconfig overriding the one in config file.
    Returns:
        ConfigFile: Config file object
    """
    config = {}
    if file_path:
        with open(file_path, "r", encoding="utf-8") as stream:
            config = yaml.safe_load(stream) or {}
        logger.debug("Loaded config file %s", file_path)
    if kubeconfig is not None and kubeconfig != '' and os.path.exists(kubeconfig):
        config['kubeconfig_file_path'] = kubeconfig
    return ConfigFile(**config)


def dump_data(data: Union[Dict, List], format: str) -> str:
    if format == 'yaml':
        return yaml.safe_dump(data, sort_keys=False)
    elif format == 'json':
        return json.dumps(data, indent=4)
    else:
        raise ValueError(f"Unsupported format: {format}")


_EXTENSION_FORMATS = {'json': 'json', 'yaml': 'yaml', 'yml': 'yaml'}


def guess_format(file_path: str, default: str = None) -> str:
    extension = os.path.splitext(file_path)[1].lstrip('.').lower()
    return _EXTENSION_FORMATS.get(extension, default)


def save_data_to_file(data: Union[Dict, List], file_path: str, format: str = None):
    """Write data to file_path as json or yaml. Without format, the file extension decides."""
    content = dump_data(data, format or guess_format(file_path))
    with open(file_path, 'w') as f:
        f.write(content)
