# student_db/errors.py
"""Модуль для определения пользовательских исключений базы студентов."""

class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(StudentAppError):
    """Запись не удовлетворяет ограничениям полей (при вводе или строгой загрузке)."""
    pass

class FileProcessingError(StudentAppError):
    """Файл базы не удалось открыть на чтение или запись."""
    pass

class DuplicateStudentIdError(StudentAppError):
    """Исключение при попытке добавить студента с уже существующим ID."""
    pass
