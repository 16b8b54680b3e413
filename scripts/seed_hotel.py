"""Seed initial rooms and staff into the database."""
from hotelier.employee import EmployeeRepository, EmployeeRole
from hotelier.errors import NotFoundError
from hotelier.room import RoomRepository

INITIAL_ROOMS = [101, 102, 103, 104, 201, 202, 203, 204, 301, 302, 303]

INITIAL_STAFF = [
    {"first_name": "Dana", "last_name": "Ortiz", "role": EmployeeRole.RECEPTIONIST},
    {"first_name": "Sam", "last_name": "Keller", "role": EmployeeRole.HOUSEKEEPER},
    {"first_name": "Priya", "last_name": "Nair", "role": EmployeeRole.HOUSEKEEPER},
    {"first_name": "Lee", "last_name": "Morgan", "role": EmployeeRole.MAINTENANCE},
    {"first_name": "Alex", "last_name": "Brandt", "role": EmployeeRole.ADMIN},
]


def main():
    rooms_repo = RoomRepository()
    employees_repo = EmployeeRepository()

    for room_number in INITIAL_ROOMS:
        try:
            rooms_repo.find_by_room_number(room_number)
            print(f"Skipping room {room_number} - already exists")
            continue
        except NotFoundError:
            pass

        room = rooms_repo.create(room_number)
        print(f"Created: room {room.room_number}")

    existing = {(e.first_name, e.last_name) for e in employees_repo.list()}
    for employee in INITIAL_STAFF:
        if (employee["first_name"], employee["last_name"]) in existing:
            print(f"Skipping {employee['first_name']} {employee['last_name']} - already exists")
            continue

        result = employees_repo.create(**employee)
        print(f"Created: {result.full_name} ({result.role.value}, id={result.id})")


if __name__ == "__main__":
    main()
