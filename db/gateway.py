from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, MutableMapping, Optional, Sequence, Tuple
from uuid import uuid4

Document = Dict[str, Any]
Filter = Dict[str, Any]
Sort = Sequence[Tuple[str, int]]

ASCENDING = 1
DESCENDING = -1


def matches(document: Document, query: Optional[Filter]) -> bool:
    """Every pair in the filter must match; list fields match on membership."""
    for field, expected in (query or {}).items():
        actual = document.get(field)
        if isinstance(actual, list) and not isinstance(expected, list):
            if expected not in actual:
                return False
        elif actual != expected:
            return False
    return True


def project(document: Document, projection: Optional[Iterable[str]]) -> Document:
    if projection is None:
        return dict(document)
    fields = {"id", *projection}
    return {key: value for key, value in document.items() if key in fields}


def sort_documents(documents: List[Document], sort: Optional[Sort]) -> List[Document]:
    # applied last key first so earlier keys win
    for field, direction in reversed(list(sort or [])):
        documents.sort(
            key=lambda doc: (doc.get(field) is not None, doc.get(field)),
            reverse=direction == DESCENDING,
        )
    return documents


class DocumentGateway(ABC):
    """Async facade over a document store keyed by entity id.

    Subclasses only provide the mapping behind each collection, the query
    semantics are shared.
    """

    @abstractmethod
    def _collection(self, name: str) -> MutableMapping[str, Document]:
        ...

    def close(self) -> None:
        pass

    async def find_all(
        self,
        collection: str,
        query: Optional[Filter] = None,
        projection: Optional[Iterable[str]] = None,
        sort: Optional[Sort] = None,
    ) -> List[Document]:
        documents = [
            project(document, projection)
            for document in self._collection(collection).values()
            if matches(document, query)
        ]
        return sort_documents(documents, sort)

    async def find_by_id(self, collection: str, entity_id: str) -> Optional[Document]:
        document = self._collection(collection).get(entity_id)
        return dict(document) if document is not None else None

    async def find_one(self, collection: str, query: Filter) -> Optional[Document]:
        for document in self._collection(collection).values():
            if matches(document, query):
                return dict(document)
        return None

    async def count(self, collection: str, query: Optional[Filter] = None) -> int:
        return sum(1 for document in self._collection(collection).values() if matches(document, query))

    async def save(self, collection: str, document: Document) -> Document:
        stored = dict(document)
        if not stored.get("id"):
            stored["id"] = uuid4().hex
        self._collection(collection)[stored["id"]] = stored
        return dict(stored)

    async def update_by_id(self, collection: str, entity_id: str, document: Document) -> Optional[Document]:
        """Replace the whole record, returns None when the id is unknown."""
        records = self._collection(collection)
        if entity_id not in records:
            return None
        stored = {**document, "id": entity_id}
        records[entity_id] = stored
        return dict(stored)

    async def remove_by_id(self, collection: str, entity_id: str) -> Optional[Document]:
        records = self._collection(collection)
        document = records.get(entity_id)
        if document is None:
            return None
        del records[entity_id]
        return dict(document)


class InMemoryGateway(DocumentGateway):
    def __init__(self, collections: Optional[Dict[str, List[Document]]] = None):
        self._collections: Dict[str, Dict[str, Document]] = {}
        for name, documents in (collections or {}).items():
            self._collections[name] = {document["id"]: dict(document) for document in documents}

    def _collection(self, name: str) -> MutableMapping[str, Document]:
        return self._collections.setdefault(name, {})
