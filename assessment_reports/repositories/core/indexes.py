"""Compound index declarations backing every filter/sort the API accepts"""
import logging
from typing import Dict, List, Tuple
from pymongo.database import Database
from pymongo.errors import PyMongoError
from assessment_reports.config.settings import INDEXES

logger = logging.getLogger(__name__)


def index_name(spec: List[Tuple[str, int]]) -> str:
    return '_'.join(f"{field}_{direction}" for field, direction in spec)


def ensure_indexes(db: Database, indexes: Dict[str, List[List[Tuple[str, int]]]] = None) -> List[str]:
    """Create declared indexes whose key pattern does not exist yet; returns created names"""
    created = []
    for coll_name, specs in (indexes or INDEXES).items():
        coll = db[coll_name]
        existing_keys = {
            tuple(tuple(k) for k in info.get("key", []))
            for info in coll.index_information().values()
        }

        for spec in specs:
            if tuple(spec) in existing_keys:
                logger.debug(f"Index {index_name(spec)} already exists on {coll_name}, skipping")
                continue
            try:
                logger.info(f"Creating index {index_name(spec)} on {coll_name}")
                created.append(coll.create_index(spec))
            except PyMongoError as e:
                logger.error(f"Failed to create index {index_name(spec)} on {coll_name}: {e}")
                raise
    return created


if __name__ == '__main__':
    from assessment_reports.db import connect_to_database
    from assessment_reports.logging_config.log_config import setup_logging

    setup_logging()
    ensure_indexes(connect_to_database())
    logger.info("Index check complete.")
