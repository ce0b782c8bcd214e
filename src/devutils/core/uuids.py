import uuid

from devutils.core.errors import ToolError
from devutils.shared import Config, load_config

config: Config = load_config()

VERSIONS = ("v1", "v3", "v4", "v5")


def generate(version: str = "v4", count: int = 5, namespace: str | None = None) -> list[str]:
    if version not in VERSIONS:
        raise ToolError(f"Unsupported UUID version: {version}")
    if not 1 <= count <= config.uuid.max_count:
        raise ToolError(f"Count must be between 1 and {config.uuid.max_count}")

    if version in ("v3", "v5"):
        if not namespace:
            raise ToolError(f"Namespace required for {version} UUIDs!")
        try:
            namespace_uuid = uuid.UUID(namespace)
        except ValueError as e:
            raise ToolError(f"Invalid namespace UUID: {namespace}") from e

        make = uuid.uuid3 if version == "v3" else uuid.uuid5
        return [str(make(namespace_uuid, f"name-{i}")) for i in range(count)]

    make = uuid.uuid1 if version == "v1" else uuid.uuid4
    return [str(make()) for _ in range(count)]
