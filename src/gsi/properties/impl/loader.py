import json
import logging
from pathlib import Path
from typing import Union

# 显式导入以触发注册
from . import thermo_mixture   # ideal_gas_mixture
from . import surface_sites    # surface_sites

from .registry import build

logger = logging.getLogger(__name__)


def load_provider_from_json(json_path: Union[str, Path]):
    p = Path(json_path)
    data = json.loads(p.read_text(encoding="utf-8"))
    # 兼容两种结构：{model, params} 和 {model, species, ...}
    params = data.get("params", data)
    logger.debug("Building provider '%s' from %s", data["model"], p)
    return build(data["model"], params)
