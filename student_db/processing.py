# student_db/processing.py
"""Модуль для обработки данных: поиск по предикату, сортировка, статистика."""
from typing import Any, Callable, Dict, Iterable, List, Optional

import pandas as pd

from .models import Student

Predicate = Callable[[Student], bool]

COLUMNS = ['id', 'surname', 'birth_year', 'study_year', 'gpa']


def search(students: Iterable[Student], predicate: Predicate) -> List[Student]:
    """Возвращает студентов, для которых predicate истинен, в исходном порядке.

    Пустой список - нормальный результат, а не ошибка.
    """
    return [s for s in students if predicate(s)]


def by_id(student_id: int) -> Predicate:
    return lambda s: s.id == student_id


def by_surname(surname: str) -> Predicate:
    """Точное совпадение фамилии с учетом регистра."""
    return lambda s: s.surname == surname


def by_birth_year(year: int) -> Predicate:
    return lambda s: s.birth_year == year


def by_study_year(year: int) -> Predicate:
    return lambda s: s.study_year == year


def gpa_at_least(threshold: float) -> Predicate:
    return lambda s: s.gpa >= threshold


def sort_students(students: Iterable[Student], by: str) -> List[Student]:
    """Сортирует список студентов по заданному критерию. Сама база не меняется."""
    if by == 'id':
        return sorted(students, key=lambda s: s.id)
    elif by == 'surname':
        return sorted(students, key=lambda s: s.surname)
    elif by == 'gpa':
        # По убыванию балла, затем по фамилии для стабильности
        return sorted(students, key=lambda s: (-s.gpa, s.surname))
    else:
        raise ValueError("Неверный ключ для сортировки. Доступно: 'id', 'surname', 'gpa'.")


def students_to_dataframe(students: Iterable[Student]) -> pd.DataFrame:
    return pd.DataFrame(
        [(s.id, s.surname, s.birth_year, s.study_year, s.gpa) for s in students],
        columns=COLUMNS,
    )


def get_group_statistics(students: Iterable[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по базе: средний балл, лучший/худший студент и разбивку по курсам."""
    students = list(students)
    if not students:
        return None

    df = students_to_dataframe(students)
    by_year = (
        df.groupby('study_year')['gpa']
        .agg(['count', 'mean'])
        .rename(columns={'mean': 'average_gpa'})
    )

    return {
        "total_students": len(students),
        "average_gpa": float(df['gpa'].mean()),
        "best_student": max(students, key=lambda s: s.gpa),
        "worst_student": min(students, key=lambda s: s.gpa),
        "by_study_year": by_year,
    }
