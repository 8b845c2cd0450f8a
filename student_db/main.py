# student_db/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) базы студентов."""
import logging
import traceback
from typing import List

from . import config, display, io_utils, processing, errors
from .models import Student
from .store import StudentDatabase


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*50)
    print("      БАЗА ДАННЫХ СТУДЕНТОВ")
    print("="*50)
    print("1. Поиск по ID")
    print("2. Поиск по фамилии")
    print("3. Поиск по году рождения")
    print("4. Поиск по курсу")
    print("5. Поиск по среднему баллу (>= порога)")
    print("6. Добавить нового студента")
    print("7. Показать всех студентов")
    print("8. Показать статистику")
    print("9. Экспорт последней выборки в CSV")
    print("0. Выход")
    print("="*50)


def read_int(prompt: str) -> int:
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"'{raw}' не является целым числом.") from None


def read_float(prompt: str) -> float:
    raw = input(prompt).strip().replace(',', '.')
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"'{raw}' не является числом.") from None


def read_student() -> Student:
    """Запрашивает поля нового студента. Проверку диапазонов делает сама база."""
    student_id = read_int("Введите ID: ")
    surname = input("Введите фамилию: ").strip()
    if not surname:
        raise ValueError("Фамилия не может быть пустой.")
    if len(surname.split()) > 1:
        # Формат файла базы не поддерживает пробелы в фамилии
        raise ValueError("Фамилия должна быть одним словом, без пробелов.")
    birth_year = read_int("Введите год рождения (1950-2015): ")
    study_year = read_int("Введите курс (1-4): ")
    gpa = read_float("Введите средний балл (0.0-5.0): ")
    return Student(student_id, surname, birth_year, study_year, gpa)


def main_cli(db: StudentDatabase, output_path: str = config.OUTPUT_FILE, export_path: str = config.EXPORT_FILE):
    """Основной цикл консольного приложения."""
    last_results: List[Student] = []

    def show(results: List[Student], title: str):
        nonlocal last_results
        last_results = results
        display.show_results(results, title, output_path)

    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        try:
            if choice == '1':
                student_id = read_int("Введите ID: ")
                found = db.find_by_id(student_id)
                show([found] if found is not None else [], f"SEARCH RESULTS: ID = {student_id}")

            elif choice == '2':
                surname = input("Введите фамилию для поиска: ").strip()
                if not surname:
                    print("❌ Фамилия не может быть пустой.")
                    continue
                show(processing.search(db, processing.by_surname(surname)), f"SEARCH RESULTS: Surname = {surname}")

            elif choice == '3':
                year = read_int("Введите год рождения: ")
                show(processing.search(db, processing.by_birth_year(year)), f"SEARCH RESULTS: Birth Year = {year}")

            elif choice == '4':
                year = read_int("Введите курс: ")
                show(processing.search(db, processing.by_study_year(year)), f"SEARCH RESULTS: Study Year = {year}")

            elif choice == '5':
                threshold = read_float("Введите минимальный средний балл: ")
                show(processing.search(db, processing.gpa_at_least(threshold)), f"SEARCH RESULTS: GPA >= {threshold}")

            elif choice == '6':
                student = read_student()
                db.append(student)
                print(f"✅ Студент {student.surname} успешно добавлен.")

            elif choice == '7':
                if not len(db):
                    print("ℹ️ База пуста.")
                else:
                    show(list(db), "ALL STUDENTS")

            elif choice == '8':
                stats = processing.get_group_statistics(db)
                if not stats:
                    print("ℹ️ База пуста, статистика недоступна.")
                else:
                    print("\n--- Статистика по базе ---")
                    print(f"Всего студентов: {stats['total_students']}")
                    print(f"Общий средний балл: {stats['average_gpa']:.2f}")
                    print(f"Лучший студент: {stats['best_student'].surname} (балл: {stats['best_student'].gpa:.2f})")
                    print(f"Худший студент: {stats['worst_student'].surname} (балл: {stats['worst_student'].gpa:.2f})")
                    print("По курсам:")
                    print(stats['by_study_year'].to_string())

            elif choice == '9':
                if not last_results:
                    print("⚠️ Нет результатов поиска для экспорта.")
                    continue
                io_utils.export_students_to_csv(export_path, last_results)
                print(f"✅ Экспортировано записей: {len(last_results)} в {export_path}.")

            elif choice == '0':
                print("👋 До свидания!")
                break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 9.")

        except ValueError as e:
            print(f"❌ Ошибка ввода: {e}")
        except errors.FileProcessingError as e:
            print(f"❌ Ошибка файла: {e}")
        except errors.StudentAppError as e:
            print(f"❌ Ошибка логики: {e}")
        except Exception as e:
            logging.exception("Непредвиденная ошибка в пункте меню %s", choice)
            print(f"❌ Произошла непредвиденная ошибка: {e}")


def run():
    """Точка входа консольной команды student-db."""
    logging.basicConfig(level=config.LOG_LEVEL)
    try:
        db = StudentDatabase(config.DB_FILE)
        print(f"Загружено студентов: {len(db)}")
        main_cli(db)
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()


if __name__ == '__main__':
    run()
