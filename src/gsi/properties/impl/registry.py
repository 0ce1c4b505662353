from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Union

if TYPE_CHECKING:
    from ..interfaces import SurfacePropertiesProvider, ThermodynamicsProvider

    Provider = Union[ThermodynamicsProvider, SurfacePropertiesProvider]
    ProviderFactory = Callable[[Dict[str, Any]], Provider]

# 模型名 -> 由 JSON params 构造 provider 的工厂
REGISTRY: Dict[str, "ProviderFactory"] = {}


def register(name: str) -> Callable[["ProviderFactory"], "ProviderFactory"]:
    def deco(factory: "ProviderFactory") -> "ProviderFactory":
        if name in REGISTRY:
            raise KeyError(f"Provider model '{name}' registered twice")
        REGISTRY[name] = factory
        return factory
    return deco


def build(name: str, params: Dict[str, Any]) -> "Provider":
    try:
        factory = REGISTRY[name]
    except KeyError:
        raise KeyError(f"Provider model '{name}' not registered; known models: {sorted(REGISTRY)}") from None
    return factory(params)
