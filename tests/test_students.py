import io

import pytest

from algokit.students import Student, StudentRegistry, main


def make(first="Ann", last="Lee", roll=1, cgpa=3.5, courses=(10, 20, 30, 40, 50)):
    return Student(first, last, roll, cgpa, courses)


@pytest.fixture
def registry():
    reg = StudentRegistry()
    reg.add(make())
    reg.add(make(first="Bob", last="Ray", roll=2, courses=(11, 20, 31, 41, 51)))
    reg.add(make(first="Ann", last="Kim", roll=3, courses=(12, 22, 32, 42, 52)))
    return reg


def test_find_by_roll(registry):
    assert registry.find_by_roll(2).first_name == "Bob"


def test_find_by_roll_missing(registry):
    assert registry.find_by_roll(99) is None


def test_find_by_first_name(registry):
    assert [s.roll for s in registry.find_by_first_name("Ann")] == [1, 3]


def test_find_by_course(registry):
    assert [s.roll for s in registry.find_by_course(20)] == [1, 2]
    assert registry.find_by_course(999) == []


def test_remaining_counts_down(registry):
    assert registry.remaining() == registry.capacity - 3


def test_delete(registry):
    assert registry.delete(2) == 1
    assert registry.find_by_roll(2) is None
    assert len(registry) == 2


def test_delete_missing(registry):
    assert registry.delete(42) == 0
    assert len(registry) == 3


def test_update_field(registry):
    assert registry.update(1, cgpa=3.9, last_name="Park") == 1
    student = registry.find_by_roll(1)
    assert (student.cgpa, student.last_name) == (3.9, "Park")


def test_update_unknown_field(registry):
    with pytest.raises(TypeError):
        registry.update(1, age=20)


def test_update_bad_courses(registry):
    with pytest.raises(ValueError):
        registry.update(1, courses=(1, 2))


def test_student_needs_five_courses():
    with pytest.raises(ValueError):
        make(courses=(1, 2, 3))


def test_courses_become_tuple():
    assert make(courses=[1, 2, 3, 4, 5]).courses == (1, 2, 3, 4, 5)


def test_full_registry():
    reg = StudentRegistry(capacity=1)
    reg.add(make())
    with pytest.raises(ValueError):
        reg.add(make(roll=2))
    assert reg.remaining() == 0


def test_main_session(monkeypatch, capsys):
    session = "1 Ann Lee 7 3.5 10 20 30 40 50\n2 7\n5\n6 7\n5\n8\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(session))
    assert main() == 0
    out = capsys.readouterr().out
    assert "The First name is Ann" in out
    assert "The total number of Student is 1" in out
    assert "The Roll Number is removed Successfully" in out
    assert "The total number of Student is 0" in out


def test_main_update(monkeypatch, capsys):
    session = "1 Ann Lee 7 3.5 1 2 3 4 5\n7 7 1 Zoe\n3 Zoe\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(session))
    assert main() == 0
    out = capsys.readouterr().out
    assert "UPDATED SUCCESSFULLY." in out
    assert "The First name is Zoe" in out