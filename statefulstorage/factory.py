# Copyright 2025 nurion team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Factory helpers to create stateful storages without leaking concrete types."""

import importlib
from typing import Any, Dict, Mapping, Type

from statefulstorage.config import CLASSNAME_KEY
from statefulstorage.errors import InitializationError
from statefulstorage.localfs import LocalFileSystemStorage
from statefulstorage.storage import StatefulStorage

_REGISTRY: Dict[str, Type[StatefulStorage]] = {
    "localfs": LocalFileSystemStorage,
}


def register_storage(name: str, storage_class: Type[StatefulStorage]) -> None:
    """Register a storage implementation under a short name."""
    if not (isinstance(storage_class, type) and issubclass(storage_class, StatefulStorage)):
        raise TypeError(f"{storage_class!r} is not a StatefulStorage implementation")
    _REGISTRY[name.lower()] = storage_class


def _load_class(name: str) -> Type[StatefulStorage]:
    registered = _REGISTRY.get(name.lower())
    if registered is not None:
        return registered

    # Accept "package.module:Class" and "package.module.Class"
    module_name, sep, class_name = name.partition(":")
    if not sep:
        module_name, _, class_name = name.rpartition(".")
    if not module_name or not class_name:
        raise InitializationError(f"Unknown stateful storage: {name}")

    try:
        module = importlib.import_module(module_name)
        storage_class = getattr(module, class_name)
    except (ImportError, AttributeError) as exc:
        raise InitializationError(f"Cannot load stateful storage {name}: {exc}") from exc

    if not (isinstance(storage_class, type) and issubclass(storage_class, StatefulStorage)):
        raise InitializationError(f"{name} is not a StatefulStorage implementation")
    return storage_class


def create_stateful_storage(conf: Mapping[str, Any]) -> StatefulStorage:
    """Create and initialize the storage named by ``statefulstorage.classname``.

    Args:
        conf: Runtime configuration mapping. The class name defaults to
            ``localfs``; the whole mapping is passed to ``init``.

    Returns:
        Initialized StatefulStorage instance.

    Examples:
        >>> storage = create_stateful_storage({
        ...     "statefulstorage.localfs.root.path": "/tmp/checkpoints",
        ... })
    """
    storage_class = _load_class(str(conf.get(CLASSNAME_KEY) or "localfs"))
    storage = storage_class()
    storage.init(conf)
    return storage


__all__ = ["create_stateful_storage", "register_storage"]
