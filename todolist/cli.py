#!/usr/bin/env python3
"""
TODOLIST - CLI Interface
========================
Command-line front end for the persistent task list.

Usage:
    todolist add Buy milk
    todolist list
    todolist check -1
    todolist remove -1
    todolist clear-done
"""

import argparse
import json
import os
import sys

from .manager import FILTERS, TaskManager
from .storage import DEFAULT_DATA_DIR, DEFAULT_SLOT_KEY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todolist",
        description="TODOLIST - Persistent Task List",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todolist add Buy milk           Add a task
  todolist draft "Call mom"       Save draft text without adding it
  todolist add                    Add the saved draft as a task
  todolist check -1               Mark task -1 done
  todolist uncheck -1             Mark task -1 not done
  todolist remove -1              Remove task -1
  todolist clear-done             Remove all done tasks
  todolist list --filter active   List open tasks
  todolist status                 Show progress report
        """
    )
    parser.add_argument(
        "--dir",
        default=os.environ.get("TODOLIST_DIR", DEFAULT_DATA_DIR),
        help="Storage directory (env: TODOLIST_DIR)"
    )
    parser.add_argument("--key", default=DEFAULT_SLOT_KEY, help="Storage slot name")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    add_parser = subparsers.add_parser("add", help="Add a task (uses the draft when no text is given)")
    add_parser.add_argument("text", nargs="*", help="Task text")

    draft_parser = subparsers.add_parser("draft", help="Show or set the draft text")
    draft_parser.add_argument("text", nargs="*", help="New draft text")

    check_parser = subparsers.add_parser("check", help="Mark a task done")
    check_parser.add_argument("task_id", type=int, help="Task ID")

    uncheck_parser = subparsers.add_parser("uncheck", help="Mark a task not done")
    uncheck_parser.add_argument("task_id", type=int, help="Task ID")

    remove_parser = subparsers.add_parser("remove", help="Remove a task")
    remove_parser.add_argument("task_id", type=int, help="Task ID")

    subparsers.add_parser("clear-done", help="Remove all done tasks")

    list_parser = subparsers.add_parser("list", help="List tasks, newest first")
    list_parser.add_argument("--filter", choices=FILTERS, default="all", help="Which tasks to show")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("status", help="Show progress report")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    manager = TaskManager(data_dir=args.dir, slot_key=args.key)

    if args.command == "add":
        added = manager.add_task(" ".join(args.text) if args.text else None)
        if not added:
            print("Nothing to add: task text is empty")
            return 1
        task_id, task = added
        print(f"Added: [{task_id}] {task.text}")

    elif args.command == "draft":
        if args.text:
            manager.update_draft(" ".join(args.text))
        print(f"Draft: {manager.store.draft_text}")

    elif args.command in ("check", "uncheck"):
        task = manager.check_task(args.task_id, checked=args.command == "check")
        if not task:
            print(f"Task not found: {args.task_id}")
            return 1
        print(f"{'Done' if task.checked else 'Open'}: [{args.task_id}] {task.text}")

    elif args.command == "remove":
        task = manager.remove_task(args.task_id)
        if not task:
            print(f"Task not found: {args.task_id}")
            return 1
        print(f"Removed: [{args.task_id}] {task.text}")

    elif args.command == "clear-done":
        count = manager.clear_completed()
        print(f"Removed {count} done task{'' if count == 1 else 's'}")

    elif args.command == "list":
        tasks = manager.list_tasks(args.filter)

        if args.json:
            print(json.dumps(
                [{"id": task_id, **task.model_dump()} for task_id, task in tasks],
                indent=2
            ))
        else:
            if not tasks:
                print("No tasks")
                return 0
            for task_id, task in tasks:
                print(f"  [{'x' if task.checked else ' '}] {task_id:>4}  {task.text}")

    elif args.command == "status":
        print(manager.get_status_report())

    return 0


if __name__ == "__main__":
    sys.exit(main())
