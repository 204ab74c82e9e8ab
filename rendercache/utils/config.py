from typing import Iterable

from omegaconf import DictConfig, ListConfig, OmegaConf

from ..core.mytyping import SubConfigType


def sub_config_to_dict(sub_config: SubConfigType) -> dict:
    if isinstance(sub_config, DictConfig):
        return OmegaConf.to_container(sub_config, resolve=True)
    elif isinstance(sub_config, dict):
        return dict(sub_config)
    else:
        raise NotImplementedError(type(sub_config))  # pragma: no cover


def iter_sub_configs(proto_sub_config: DictConfig|ListConfig|None) -> Iterable[SubConfigType]:
    if proto_sub_config is None:
        return
    if isinstance(proto_sub_config, ListConfig):
        for sub_config in proto_sub_config:
            yield sub_config
    elif isinstance(proto_sub_config, DictConfig):
        yield proto_sub_config
    else:
        raise NotImplementedError(type(proto_sub_config))  # pragma: no cover
