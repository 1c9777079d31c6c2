"""Show how mapper method parameters are named for the query engine."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Optional

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_mapper").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_mapper import Configuration, MethodSignature, Param, RowBounds, wrap_collection


class UserMapper:
    def find_by_id(self, user_id: int) -> Optional[dict]: ...

    def find_by_name(
        self,
        first: Annotated[str, Param("firstName")],
        last: Annotated[str, Param("lastName")],
    ) -> list[dict]: ...

    def find_page(self, status: str, bounds: RowBounds, owner: str) -> list[dict]: ...

    def find_by_ids(self, ids: list[int]) -> list[dict]: ...


def show_for_config(name: str, config: Configuration) -> None:
    print(f"\n===== {name} =====")
    mapper = UserMapper()
    calls = [
        (mapper.find_by_id, [7]),
        (mapper.find_by_name, ["Ada", "Lovelace"]),
        (mapper.find_page, ["active", RowBounds(offset=20, limit=10), "ops"]),
        (mapper.find_by_ids, [[1, 2, 3]]),
    ]
    for method, args in calls:
        signature = MethodSignature(config, method)
        param = signature.convert_args_to_sql_command_param(args)
        print(f"{method.__name__}:")
        print("  names:", signature.resolver.get_names())
        print("  param:", wrap_collection(param))
        print("  row bounds:", signature.extract_row_bounds(args))


def main() -> None:
    show_for_config("declared names", Configuration())
    show_for_config("positional names", Configuration(use_actual_param_name=False))


if __name__ == "__main__":
    main()
