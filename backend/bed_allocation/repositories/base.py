"""
Base repository.
Provides generic CRUD operations.
"""
from typing import TypeVar, Generic, Optional, List, Type
from sqlmodel import Session, select, func
from pydantic import BaseModel

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic base repository.
    
    Common CRUD operations for any model.
    
    Usage:
        class MyRepository(BaseRepository[MyModel]):
            def __init__(self, session: Session):
                super().__init__(session, MyModel)
    """
    
    def __init__(self, session: Session, model: Type[T]):
        """
        Initializes the repository.
        
        Args:
            session: Database session
            model: SQLModel class
        """
        self.session = session
        self.model = model
    
    def get_by_id(self, id: str) -> Optional[T]:
        """
        Returns a record by ID.
        
        Args:
            id: Record ID
        
        Returns:
            The record or None if it does not exist
        """
        return self.session.get(self.model, id)
    
    def get_all(self, offset: int = 0, limit: Optional[int] = None) -> List[T]:
        """
        Returns every record, optionally paginated.
        
        Args:
            offset: Number of records to skip
            limit: Maximum number of records
        
        Returns:
            List of records
        """
        query = select(self.model).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return list(self.session.exec(query).all())
    
    def create(self, data: BaseModel) -> T:
        """
        Creates a record from a Pydantic schema.
        
        Args:
            data: Pydantic schema with the data
        
        Returns:
            The created record
        """
        return self.create_from_dict(data.model_dump())
    
    def create_from_dict(self, data: dict) -> T:
        """
        Creates a record from a dictionary.
        
        Args:
            data: Dictionary with the data
        
        Returns:
            The created record
        """
        obj = self.model(**data)
        return self.save(obj)
    
    def update_from_dict(self, obj: T, data: dict) -> T:
        """
        Updates a record from a dictionary, skipping None values.
        
        Args:
            obj: The record to update
            data: Dictionary with the new values
        
        Returns:
            The updated record
        """
        for key, value in data.items():
            if value is not None:
                setattr(obj, key, value)
        return self.save(obj)
    
    def delete(self, obj: T) -> None:
        """
        Deletes a record.
        
        Args:
            obj: The record to delete
        """
        self.session.delete(obj)
        self.session.commit()
    
    def save(self, obj: T) -> T:
        """
        Persists changes on a record.
        
        Args:
            obj: The record to save
        
        Returns:
            The saved record
        """
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj
    
    def count(self) -> int:
        """
        Counts every record.
        
        Returns:
            Number of records
        """
        result = self.session.exec(
            select(func.count()).select_from(self.model)
        ).first()
        return result or 0
