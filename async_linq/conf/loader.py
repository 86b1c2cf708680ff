import json
import os
from typing import IO, Any

import yaml

from async_linq.utils.env import get_env


class ConfLoader(yaml.SafeLoader):
    """YAML loader resolving `!env` and `!include` tags.

    Included paths are relative to the directory of the loaded file.
    """

    root: str

    def __init__(self, stream: IO) -> None:
        try:
            self.root = os.path.split(stream.name)[0]
        except AttributeError:
            self.root = os.path.curdir

        super().__init__(stream)


def construct_include(loader: ConfLoader, node: yaml.Node) -> Any:
    filename = os.path.abspath(
        os.path.join(loader.root, loader.construct_scalar(node))  # type: ignore
    )
    extension = os.path.splitext(filename)[1].lstrip(".")

    with open(filename, "r") as f:
        if extension in ("yaml", "yml"):
            return yaml.load(f, ConfLoader)
        if extension == "json":
            return json.load(f)
        return f.read()


def construct_env(loader: ConfLoader, node: yaml.Node) -> Any:
    """`!env NAME` or `!env NAME:default`."""

    name, sep, default = str(loader.construct_yaml_str(node)).partition(":")
    return get_env(name, default if sep else None)


yaml.add_constructor("!include", construct_include, ConfLoader)
yaml.add_constructor("!env", construct_env, ConfLoader)
