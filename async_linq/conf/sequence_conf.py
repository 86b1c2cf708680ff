from pathlib import Path
from typing import Type, TypeVar

import yaml
from pydantic import BaseModel, PositiveInt, TypeAdapter

from async_linq.conf.loader import ConfLoader
from async_linq.utils.checked import INT32_MAX


class SequenceConf(BaseModel):
    max_index: PositiveInt = INT32_MAX


DEFAULT_CONF = SequenceConf()

T = TypeVar("T")


def read_conf(type_: Type[T], path: Path) -> T:
    with path.open() as stream:
        data = yaml.load(stream, Loader=ConfLoader)
    return TypeAdapter(type_).validate_python(data or {})
