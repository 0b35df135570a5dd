import argparse
import logging
import sys
from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from config import Settings, get_settings
from database import engine as default_engine, Base, SessionLocal
from logging_setup import setup_logging
import models  # noqa: F401
from models.status import StatusDB

logger = logging.getLogger(__name__)

DEFAULT_STATUSES = ["new", "in progress", "testing", "done"]


def list_tables(engine: Optional[Engine] = None) -> List[str]:
    """Список таблиц в базе"""
    engine = engine or default_engine
    return sorted(inspect(engine).get_table_names())


def create_tables(engine: Optional[Engine] = None) -> None:
    engine = engine or default_engine
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created")


def drop_tables(engine: Optional[Engine] = None) -> None:
    """Удалить все таблицы приложения в порядке зависимостей"""
    engine = engine or default_engine
    Base.metadata.drop_all(bind=engine)
    logger.info("All tables dropped")


def seed_statuses(engine: Optional[Engine] = None, names: Optional[List[str]] = None) -> List[str]:
    """Добавить статусы по умолчанию, которых ещё нет; возвращает добавленные"""
    session_factory = sessionmaker(bind=engine) if engine is not None else SessionLocal
    names = names or DEFAULT_STATUSES
    added = []
    with session_factory() as db:
        existing = {name for (name,) in db.query(StatusDB.name).all()}
        for name in names:
            if name not in existing:
                db.add(StatusDB(name=name))
                added.append(name)
        db.commit()
    return added


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Управление базой данных менеджера задач')
    parser.add_argument('--create', action='store_true', help='Создать все таблицы')
    parser.add_argument('--drop', action='store_true', help='Удалить все таблицы')
    parser.add_argument('--seed', action='store_true', help='Добавить статусы по умолчанию')
    parser.add_argument('--force', action='store_true', help='Не запрашивать подтверждение')

    args = parser.parse_args(argv)

    if not (args.create or args.drop or args.seed):
        parser.print_help()
        return 0

    if args.drop:
        print("Операция: УДАЛЕНИЕ ВСЕХ ТАБЛИЦ")
        print("=" * 40)

        tables = list_tables()
        if not tables:
            print("Нет таблиц для удаления")
        else:
            print(f"Найдено таблиц: {len(tables)}")
            for table in tables:
                print(f"  - {table}")

            if not args.force:
                confirm = input("\nВы уверены, что хотите удалить ВСЕ таблицы? (y/N): ")
                if confirm.lower() not in ['y', 'yes']:
                    print("Операция отменена")
                    return 1

            drop_tables()
            print("Все таблицы успешно удалены")

    if args.create:
        create_tables()
        print("Таблицы созданы")

    if args.seed:
        create_tables()
        added = seed_statuses()
        print(f"Добавлено статусов: {len(added)}")

    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
