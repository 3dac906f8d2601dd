from __future__ import annotations

import argparse
import json

from recruit_form.core.validation import validate_application
from recruit_form.db.session import create_draft_engine
from recruit_form.services.draft_store import DraftStoreManager
from recruit_form.services.kv_store import SqlKeyValueStore


def _manager(database_url: str | None) -> DraftStoreManager:
    return DraftStoreManager(SqlKeyValueStore(create_draft_engine(database_url)))


def _show(manager: DraftStoreManager) -> int:
    state = manager.load()
    payload = {
        "draft": state.draft.model_dump(by_alias=True),
        "skills": state.skills.as_list(),
        "portfolioLinks": state.portfolio_links,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def _validate(manager: DraftStoreManager) -> int:
    state = manager.load()
    errors = validate_application(state.draft, state.skills.as_list(), state.portfolio_links)
    if not errors:
        print("Draft is ready to submit.")
        return 0
    for error in errors:
        print(f"{error.field.value}: {error.message}")
    return 1


def _clear(manager: DraftStoreManager, assume_yes: bool) -> int:
    if not assume_yes:
        answer = input("Clear all saved form data? [y/N] ").strip().lower()
        if answer not in {"y", "yes"}:
            print("Nothing cleared.")
            return 1
    manager.clear()
    print("Saved form data cleared.")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect or reset the saved application draft.")
    parser.add_argument("--database-url", default=None)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show")
    sub.add_parser("validate")
    clear = sub.add_parser("clear")
    clear.add_argument("--yes", action="store_true")
    args = parser.parse_args(argv)

    manager = _manager(args.database_url)
    if args.command == "show":
        return _show(manager)
    if args.command == "validate":
        return _validate(manager)
    return _clear(manager, args.yes)


if __name__ == "__main__":
    raise SystemExit(main())
