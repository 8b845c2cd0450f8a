# tests/test_store.py
import logging
import os

import pytest
from student_db.store import StudentDatabase, LoadReport, DEFAULT_STUDENTS
from student_db.models import Student
from student_db.errors import DataValidationError, DuplicateStudentIdError, FileProcessingError

def write_db(path, *lines):
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

def test_missing_file_seeds_defaults_without_writing(db_path):
    db = StudentDatabase(db_path)

    assert db.size() == 5
    assert [s.id for s in db] == [101, 102, 103, 104, 105]
    # Заполнение примерами файл не создает
    assert not os.path.exists(db_path)

def test_missing_file_without_seed_is_empty(db_path, caplog):
    caplog.set_level(logging.INFO)
    db = StudentDatabase(db_path, seed=False)

    assert len(db) == 0
    assert "не найден" in caplog.text

def test_load_skips_bad_lines(db_path, caplog):
    write_db(
        db_path,
        "101 Ivanov 2005 1 4.5",
        "",
        "garbage line",
        "102 Petrov 1900 2 3.8",
        "101 Again 2004 2 3.0",
        "103   Sidorov\t2006 1 4.2 extra",
    )
    db = StudentDatabase(db_path, seed=False)
    report = db.load()

    assert report == LoadReport(loaded=2, unparsed=1, invalid=1, duplicates=1)
    assert report.skipped == 3
    assert [s.id for s in db] == [101, 103]
    assert "невалидную запись (строка 4, ID: 102)" in caplog.text
    assert "повторяющийся ID 101" in caplog.text

def test_strict_load_rejects_invalid_line(db_path):
    write_db(db_path, "101 Ivanov 2005 1 4.5", "102 Petrov 2004 2 9.9")
    with pytest.raises(DataValidationError):
        StudentDatabase(db_path, strict=True)

def test_strict_load_rejects_unparsed_line(db_path):
    write_db(db_path, "101 Ivanov 2005 1 4.5", "oops")
    db = StudentDatabase(db_path)
    with pytest.raises(DataValidationError):
        db.load(strict=True)

def test_line_with_non_utf8_bytes_is_skipped(db_path):
    with open(db_path, "wb") as f:
        f.write(b"101 Ivanov 2005 1 4.5\n102 Petr\xffov 2004 2 3.8\n103 Sidorov 2006 1 4.2\n")

    db = StudentDatabase(db_path, seed=False)
    report = db.load()

    assert [s.id for s in db] == [101, 103]
    assert report == LoadReport(loaded=2, unparsed=1)

def test_failed_strict_load_keeps_current_records(seeded_db, db_path):
    write_db(db_path, "oops")

    with pytest.raises(DataValidationError):
        seeded_db.load(strict=True)

    assert seeded_db.size() == 5
    assert seeded_db.find_by_id(101) is not None

def test_failed_read_keeps_current_records(seeded_db, tmp_path):
    # Каталог вместо файла: load падает, но база остается прежней
    seeded_db.path = str(tmp_path)

    with pytest.raises(FileProcessingError):
        seeded_db.load()

    assert seeded_db.size() == 5

def test_strict_load_rejects_duplicate_id(db_path):
    write_db(db_path, "101 Ivanov 2005 1 4.5", "101 Ivanov 2005 1 4.5")
    with pytest.raises(DuplicateStudentIdError):
        StudentDatabase(db_path, strict=True)

def test_file_with_only_invalid_records_falls_back_to_defaults(db_path):
    write_db(db_path, "1 Bad 1800 1 4.0", "not a record")
    db = StudentDatabase(db_path)
    assert [s.id for s in db] == [row[0] for row in DEFAULT_STUDENTS]

def test_append_then_find(seeded_db):
    new = Student(106, "Orlov", 2005, 1, 4.0)
    seeded_db.append(new)

    assert seeded_db.find_by_id(106) is new
    assert seeded_db.records[-1] is new

def test_appended_record_cannot_be_changed_afterwards(seeded_db):
    new = Student(106, "Orlov", 2005, 1, 4.0)
    seeded_db.append(new)

    with pytest.raises(AttributeError):
        new.gpa = 9.0
    with pytest.raises(AttributeError):
        new.id = 101

    assert all(s.is_valid() for s in seeded_db.records)
    assert len({s.id for s in seeded_db.records}) == seeded_db.size()

def test_find_by_id_not_found(seeded_db):
    assert seeded_db.find_by_id(999) is None

def test_append_duplicate_id(seeded_db, db_path):
    with pytest.raises(DuplicateStudentIdError):
        seeded_db.append(Student(101, "Dup", 2000, 1, 3.0))

    assert seeded_db.size() == 5
    assert seeded_db.find_by_id(101).surname == "Ivanov"
    assert not os.path.exists(db_path)

@pytest.mark.parametrize("student", [
    Student(106, "Orlov", 2005, 1, 5.5),
    Student(106, "Orlov", 1900, 1, 4.0),
    Student(106, "Orlov", 2005, 7, 4.0),
    Student(0, "Orlov", 2005, 1, 4.0),
    Student(106, "", 2005, 1, 4.0),
])
def test_append_invalid_record(seeded_db, db_path, student):
    with pytest.raises(DataValidationError):
        seeded_db.append(student)

    assert seeded_db.size() == 5
    assert seeded_db.find_by_id(student.id) is None
    assert not os.path.exists(db_path)

def test_invalid_record_with_duplicate_id_reports_validation_first(seeded_db):
    with pytest.raises(DataValidationError):
        seeded_db.append(Student(101, "Dup", 2000, 1, 7.0))

def test_append_persists_whole_store(seeded_db, db_path):
    seeded_db.append(Student(106, "Orlov", 2005, 1, 4))

    with open(db_path, encoding="utf-8") as f:
        lines = f.read().splitlines()

    assert lines[0] == "101 Ivanov 2005 1 4.5"
    assert lines[-1] == "106 Orlov 2005 1 4.0"
    assert len(lines) == 6

def test_orlov_scenario_survives_reload(seeded_db, db_path):
    seeded_db.append(Student(106, "Orlov", 2005, 1, 4.0))
    assert seeded_db.size() == 6

    seeded_db.persist()
    reloaded = StudentDatabase(db_path)

    assert reloaded.size() == 6
    assert reloaded.find_by_id(106) == Student(106, "Orlov", 2005, 1, 4.0)

def test_persist_load_roundtrip(seeded_db, db_path):
    seeded_db.persist()
    reloaded = StudentDatabase(db_path, seed=False)

    assert reloaded.records == seeded_db.records

def test_append_storage_failure_keeps_store_usable(tmp_path):
    db = StudentDatabase(str(tmp_path / "missing_dir" / "db.txt"))

    with pytest.raises(FileProcessingError):
        db.append(Student(106, "Orlov", 2005, 1, 4.0))

    # Запись осталась в памяти, база согласована и работает дальше
    assert db.size() == 6
    assert db.find_by_id(106) is not None
    with pytest.raises(DuplicateStudentIdError):
        db.append(Student(106, "Orlov", 2005, 1, 4.0))

def test_persist_failure(tmp_path):
    db = StudentDatabase(str(tmp_path / "missing_dir" / "db.txt"))
    with pytest.raises(FileProcessingError):
        db.persist()

def test_unreadable_file_raises(tmp_path):
    # Каталог вместо файла: существует, но прочитать нельзя
    with pytest.raises(FileProcessingError):
        StudentDatabase(str(tmp_path))

def test_records_is_snapshot(seeded_db):
    snapshot = seeded_db.records
    seeded_db.append(Student(106, "Orlov", 2005, 1, 4.0))

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 5
    assert len(seeded_db.records) == 6

def test_to_dataframe(seeded_db):
    df = seeded_db.to_dataframe()

    assert list(df.columns) == ["id", "surname", "birth_year", "study_year", "gpa"]
    assert df.shape == (5, 5)
    assert df["id"].tolist() == [101, 102, 103, 104, 105]
