"""
Repository Interface
====================

Generic collection-like contract shared by every aggregate repository.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

EntityType = TypeVar("EntityType")


class Repository(ABC, Generic[EntityType]):
    """
    Abstract keyed store of entities.
    
    ``find_by_id`` answers None for a missing id, while ``update`` and
    ``delete`` raise NotFoundError.
    """
    
    @abstractmethod
    def add(self, entity_id: str, entity: EntityType) -> EntityType:
        """
        Store a new entity.
        
        Args:
            entity_id: Unique identifier
            entity: Entity to store
            
        Returns:
            Stored entity
            
        Raises:
            ConflictError: If the id is already present
        """
        pass
    
    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[EntityType]:
        """
        Find an entity by its ID.
        
        Returns:
            Entity if found, None otherwise
        """
        pass
    
    @abstractmethod
    def find_all(self) -> List[EntityType]:
        """
        List every entity.
        
        Returns:
            Entities in insertion order
        """
        pass
    
    @abstractmethod
    def update(self, entity_id: str, entity: EntityType) -> EntityType:
        """
        Replace a stored entity.
        
        Raises:
            NotFoundError: If the id is absent
        """
        pass
    
    @abstractmethod
    def delete(self, entity_id: str) -> None:
        """
        Remove an entity.
        
        Raises:
            NotFoundError: If the id is absent
        """
        pass
    
    @abstractmethod
    def exists(self, entity_id: str) -> bool:
        """Check if an entity exists."""
        pass
