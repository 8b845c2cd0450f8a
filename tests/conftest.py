# tests/conftest.py
import pytest
from typing import List
from student_db.models import Student
from student_db.store import StudentDatabase

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student(7, "Smirnova", 2001, 4, 4.8),
        Student(3, "Kuznetsov", 2003, 2, 3.25),
        Student(5, "Popov", 2004, 1, 2.0),
    ]

@pytest.fixture
def db_path(tmp_path) -> str:
    """Путь к файлу базы во временном каталоге (сам файл не создается)."""
    return str(tmp_path / "students_database.txt")

@pytest.fixture
def seeded_db(db_path) -> StudentDatabase:
    """База, заполненная пятью записями по умолчанию."""
    return StudentDatabase(db_path)
