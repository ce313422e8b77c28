from pathlib import Path
from typing import Dict, MutableMapping

from loguru import logger
from sqlitedict import SqliteDict

from db.gateway import Document, DocumentGateway


class SqliteDictGateway(DocumentGateway):
    """Every collection is a table of one SQLite file, values are pickled documents."""

    def __init__(self, filename: str):
        Path(filename).parent.mkdir(parents=True, exist_ok=True)
        self.filename = filename
        self._tables: Dict[str, SqliteDict] = {}

    def _collection(self, name: str) -> MutableMapping[str, Document]:
        table = self._tables.get(name)
        if table is None:
            table = SqliteDict(self.filename, tablename=name, autocommit=True)
            self._tables[name] = table
            logger.debug(f"Opened collection {name} in {self.filename}")
        return table

    def close(self) -> None:
        for name, table in self._tables.items():
            table.close()
            logger.debug(f"Closed collection {name}")
        self._tables.clear()
