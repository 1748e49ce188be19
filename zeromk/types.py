from typing import Any, TypeAlias
from collections.abc import Callable


# Type aliases for decoded API payloads
APIResponse: TypeAlias = dict[str, Any]
YAMLDocument: TypeAlias = dict[str, Any]

# Callable deleting a link given its delete URI and delete code
LinkDeleter: TypeAlias = Callable[[str, str], bool]
