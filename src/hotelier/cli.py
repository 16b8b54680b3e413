#!/usr/bin/env python3
"""Hotelier CLI for daily housekeeping operations."""

import argparse
from datetime import datetime

import questionary
from rich.console import Console
from rich.table import Table

from hotelier.cleaning import CleaningService
from hotelier.config import config
from hotelier.employee import Employee, EmployeeRepository, EmployeeRole
from hotelier.errors import ForbiddenError
from hotelier.logging_config import setup_logging
from hotelier.paging import PageRequest
from hotelier.room import CleaningStatus, Room, RoomRepository

console = Console()


def select_employee(message: str = "Select an employee:", role: EmployeeRole = None) -> Employee | None:
    """Prompt the user to select an employee, optionally limited to one role."""
    employees = EmployeeRepository().list(role=role)
    if not employees:
        console.print("[red]No employees found.[/]")
        return None
    return questionary.select(
        message,
        choices=[
            questionary.Choice(title=f"{e.full_name} ({e.role.value.lower()})", value=e)
            for e in employees
        ],
    ).ask()


def select_room(status: CleaningStatus) -> Room | None:
    """Prompt the user to select a room in the given cleaning status."""
    rooms = [r for r in RoomRepository().list() if r.cleaning_status == status]
    if not rooms:
        console.print(f"[red]No rooms are {status.value.lower().replace('_', ' ')}.[/]")
        return None
    return questionary.select(
        "Select a room:",
        choices=[questionary.Choice(title=f"Room {r.room_number}", value=r) for r in rooms],
    ).ask()


def show_queue(employee_id: int = None, page_index: int = 0):
    """Print the cleaning work queue, optionally for one employee."""
    service = CleaningService()
    page_request = PageRequest(page_index=page_index)
    if employee_id is None:
        page = service.list_all(page_request)
        title = "Cleaning queue"
    else:
        page = service.list_by_employee(employee_id, page_request)
        title = f"Cleaning queue for employee {employee_id}"

    table = Table(title=f"{title} (page {page.page_index + 1} of {max(page.total_pages, 1)})")
    table.add_column("Room", justify="right")
    table.add_column("Priority", justify="right")
    table.add_column("Employee", justify="right")
    table.add_column("Added")
    for task in page.items:
        added = datetime.fromtimestamp(task.date_added / 1000).strftime("%Y-%m-%d %H:%M")
        table.add_row(str(task.room_number), str(task.priority), str(task.employee_id), added)

    console.print(table)
    console.print(f"[dim]{page.total} task(s) in total.[/]")


def schedule_cleaning():
    """Schedule a room for cleaning."""
    room = select_room(CleaningStatus.AVAILABLE)
    if not room:
        return
    employee = select_employee("Assign to:")
    if not employee:
        return
    priority = questionary.text(
        "Priority (higher is sooner):",
        default="0",
        validate=lambda v: v.isdigit() or "Enter a non-negative whole number",
    ).ask()
    if priority is None:
        return

    summary = (
        f"Will schedule room [bold]{room.room_number}[/] for cleaning by "
        f"[bold]{employee.full_name}[/] with priority {priority}."
    )
    console.print(f"[yellow]{summary}[/]")

    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    task = CleaningService().schedule_cleaning(employee.id, room.room_number, int(priority))
    console.print(f"[green]Scheduled cleaning {task.id} for room {task.room_number}.[/]")


def start_cleaning():
    """Start cleaning a scheduled room."""
    room = select_room(CleaningStatus.SCHEDULED_FOR_CLEANING)
    if not room:
        return
    worker = select_employee("Who is cleaning?")
    if not worker:
        return

    console.print(f"[yellow]Will mark room [bold]{room.room_number}[/] as being cleaned.[/]")
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    CleaningService().start_cleaning(worker.id, room.room_number)
    console.print(f"[green]Room {room.room_number} is being cleaned.[/]")


def finish_cleaning():
    """Finish cleaning a room."""
    room = select_room(CleaningStatus.BEING_CLEANED)
    if not room:
        return
    worker = select_employee("Who cleaned it?")
    if not worker:
        return

    console.print(f"[yellow]Will mark room [bold]{room.room_number}[/] as clean.[/]")
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    CleaningService().finish_cleaning(worker.id, room.room_number)
    console.print(f"[green]Room {room.room_number} is clean.[/]")


def main():
    parser = argparse.ArgumentParser(description="Hotelier CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    queue_parser = subparsers.add_parser("queue", help="Show the cleaning work queue")
    queue_parser.add_argument("--employee", type=int, help="Only tasks assigned to this employee ID")
    queue_parser.add_argument("--page", type=int, default=0, help="Zero-based page index")
    subparsers.add_parser("schedule", help="Schedule a room for cleaning")
    subparsers.add_parser("start", help="Start cleaning a scheduled room")
    subparsers.add_parser("finish", help="Finish cleaning a room")

    args = parser.parse_args()
    setup_logging(config.log_level)

    try:
        if args.command == "queue":
            show_queue(employee_id=args.employee, page_index=args.page)
        elif args.command == "schedule":
            schedule_cleaning()
        elif args.command == "start":
            start_cleaning()
        elif args.command == "finish":
            finish_cleaning()
    except (ValueError, ForbiddenError) as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
