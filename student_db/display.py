# student_db/display.py
"""Вывод результатов поиска таблицей сразу в консоль и в файл журнала."""
import logging
import sys
from typing import IO, Iterable, List, Optional

from .models import Student
from .errors import FileProcessingError

logger = logging.getLogger(__name__)

RULE_WIDTH = 60
NOTHING_FOUND = "Записи, удовлетворяющие условию, не найдены."


class TeeWriter:
    """Пишет каждую строку во все переданные потоки сразу.

    Потоки, открытые самим TeeWriter (см. console_and_file), закрываются
    в close() или при выходе из with-блока; чужие потоки только сбрасываются.
    """

    def __init__(self, *sinks: IO[str]):
        self.sinks = list(sinks)
        self._owned: List[IO[str]] = []

    @classmethod
    def console_and_file(cls, filepath: str, console: Optional[IO[str]] = None, append: bool = True) -> "TeeWriter":
        mode = 'a' if append else 'w'
        try:
            file = open(filepath, mode=mode, encoding='utf-8')
        except OSError as e:
            raise FileProcessingError(f"Не удалось открыть файл вывода {filepath}: {e}") from e
        writer = cls(console if console is not None else sys.stdout, file)
        writer._owned.append(file)
        return writer

    def write(self, text: str) -> int:
        for sink in self.sinks:
            sink.write(text)
        return len(text)

    def flush(self):
        for sink in self.sinks:
            if hasattr(sink, 'flush'):
                sink.flush()

    def close(self):
        self.flush()
        for sink in self._owned:
            sink.close()
        self._owned.clear()

    def __enter__(self) -> "TeeWriter":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def format_table(students: Iterable[Student], title: str) -> str:
    """Таблица с заголовком, колонками фиксированной ширины и итоговым числом записей."""
    students = list(students)
    lines = [
        "",
        "=" * RULE_WIDTH,
        f"=== {title} ===",
        "=" * RULE_WIDTH,
        f"{'ID':>6} | {'Surname':>15} | {'Birth Year':>11} | {'Year':>5} | {'GPA':>6}",
        "-" * RULE_WIDTH,
    ]
    for s in students:
        lines.append(f"{s.id:>6} | {s.surname:>15} | {s.birth_year:>11} | {s.study_year:>5} | {s.gpa:>6.2f}")
    lines.append("=" * RULE_WIDTH)
    lines.append(f"Total records: {len(students)}")
    return "\n".join(lines) + "\n"


def show_results(students: Iterable[Student], title: str, output_path: str, console: Optional[IO[str]] = None):
    """Печатает таблицу в консоль и дописывает её в файл вывода.

    Пустой результат сообщается только в консоль. Если файл вывода
    недоступен, ошибка попадает в лог, а таблица всё равно печатается.
    """
    console = console if console is not None else sys.stdout
    students = list(students)
    if not students:
        console.write(NOTHING_FOUND + "\n")
        return

    table = format_table(students, title)
    try:
        writer = TeeWriter.console_and_file(output_path, console=console)
    except FileProcessingError as e:
        logger.error("Ошибка записи в файл вывода: %s", e)
        console.write(table)
        return

    with writer:
        writer.write(table)
