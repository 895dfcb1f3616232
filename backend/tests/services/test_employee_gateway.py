"""Employee Gateway - SqlEmployeeGateway against an in-memory SQLite database.

Tests cover:
    - insert assigns increasing ids
    - find_by_id / find_all read committed rows in primary-key order
    - execute_raw_update returns affected rows and is visible to a later find
      even when the row was already loaded in the session
    - update_by_id and delete_by_id
"""

from employee_api.infrastructure.employee_gateway import SqlEmployeeGateway
from employee_api.models.employee import Employee


def _employee(first_name: str = "Kavitha", age: int = 30) -> Employee:
    return Employee(
        first_name=first_name, last_name="Anooj", age=age,
        position="TechnologyAnalyst",
    )


async def test_insert_assigns_ids(test_db):
    gateway = SqlEmployeeGateway(test_db)

    first = await gateway.insert(_employee("A"))
    second = await gateway.insert(_employee("B"))

    assert isinstance(first, int)
    assert second > first


async def test_find_by_id_present_and_absent(test_db):
    gateway = SqlEmployeeGateway(test_db)
    employee_id = await gateway.insert(_employee())

    found = await gateway.find_by_id(employee_id)

    assert found is not None
    assert found.first_name == "Kavitha"
    assert await gateway.find_by_id(employee_id + 100) is None


async def test_find_all_in_id_order(test_db):
    gateway = SqlEmployeeGateway(test_db)
    for name in ("C", "A", "B"):
        await gateway.insert(_employee(name))

    employees = await gateway.find_all()

    assert [e.first_name for e in employees] == ["C", "A", "B"]
    assert [e.id for e in employees] == sorted(e.id for e in employees)


async def test_raw_update_visible_after_cached_read(test_db):
    gateway = SqlEmployeeGateway(test_db)
    employee_id = await gateway.insert(_employee(age=30))
    await gateway.find_by_id(employee_id)

    affected = await gateway.execute_raw_update(
        "UPDATE employee SET age = :value WHERE id = :id",
        {"value": 31, "id": employee_id},
    )

    assert affected == 1
    refreshed = await gateway.find_by_id(employee_id)
    assert refreshed.age == 31


async def test_raw_update_on_missing_id_affects_nothing(test_db):
    gateway = SqlEmployeeGateway(test_db)

    affected = await gateway.execute_raw_update(
        "UPDATE employee SET position = :value WHERE id = :id",
        {"value": "Manager", "id": 12345},
    )

    assert affected == 0


async def test_update_by_id(test_db):
    gateway = SqlEmployeeGateway(test_db)
    employee_id = await gateway.insert(_employee())

    affected = await gateway.update_by_id(employee_id, {
        "first_name": "John", "last_name": "Doe", "age": 25,
        "position": "Developer",
    })

    assert affected == 1
    employee = await gateway.find_by_id(employee_id)
    assert (employee.first_name, employee.age) == ("John", 25)
    assert employee.id == employee_id


async def test_delete_by_id(test_db):
    gateway = SqlEmployeeGateway(test_db)
    keep = await gateway.insert(_employee("Keep"))
    drop = await gateway.insert(_employee("Drop"))

    await gateway.delete_by_id(drop)

    assert await gateway.find_by_id(drop) is None
    assert [e.id for e in await gateway.find_all()] == [keep]
