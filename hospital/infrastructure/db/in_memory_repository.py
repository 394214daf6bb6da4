"""
In-Memory Repository
====================

Concrete implementation of the generic Repository port backed by a dict.

Storage lasts for the lifetime of the process. A re-entrant lock guards
every read and write.
"""
import logging
import threading
from typing import Callable, Dict, Generic, List, Optional

from hospital.core.exceptions import ConflictError, NotFoundError
from hospital.domain.repositories.repository import EntityType, Repository

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[EntityType], Generic[EntityType]):
    """
    Dict-backed implementation of Repository.
    
    Entities are kept in insertion order; ``update`` keeps the original
    position of the entry.
    """
    
    ENTITY_NAME = "Entity"
    
    def __init__(self) -> None:
        self._items: Dict[str, EntityType] = {}
        self._lock = threading.RLock()
    
    def add(self, entity_id: str, entity: EntityType) -> EntityType:
        with self._lock:
            if entity_id in self._items:
                raise ConflictError(f"{self.ENTITY_NAME} with id {entity_id} already exists")
            self._items[entity_id] = entity
        logger.debug("%s %s added", self.ENTITY_NAME, entity_id)
        return entity
    
    def find_by_id(self, entity_id: str) -> Optional[EntityType]:
        with self._lock:
            return self._items.get(entity_id)
    
    def find_all(self) -> List[EntityType]:
        with self._lock:
            return list(self._items.values())
    
    def update(self, entity_id: str, entity: EntityType) -> EntityType:
        with self._lock:
            if entity_id not in self._items:
                raise NotFoundError(f"{self.ENTITY_NAME} with id {entity_id} not found")
            self._items[entity_id] = entity
        logger.debug("%s %s updated", self.ENTITY_NAME, entity_id)
        return entity
    
    def delete(self, entity_id: str) -> None:
        with self._lock:
            if entity_id not in self._items:
                raise NotFoundError(f"{self.ENTITY_NAME} with id {entity_id} not found")
            del self._items[entity_id]
        logger.debug("%s %s deleted", self.ENTITY_NAME, entity_id)
    
    def exists(self, entity_id: str) -> bool:
        with self._lock:
            return entity_id in self._items
    
    def _filter(self, predicate: Callable[[EntityType], bool]) -> List[EntityType]:
        return [entity for entity in self.find_all() if predicate(entity)]
