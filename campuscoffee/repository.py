"""
POS persistence

PosRepository describes what the service expects from a storage
backend. InMemoryPosRepository is the implementation used by the CLI
and the tests.
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List

from .exceptions import DuplicatePosNameError, PosNotFoundError
from .models import Pos


class PosRepository:
    """Storage backend interface for POS"""
    
    def clear(self) -> None:
        raise NotImplementedError
    
    def get_all(self) -> List[Pos]:
        raise NotImplementedError
    
    def get_by_id(self, pos_id: int) -> Pos:
        """Raises PosNotFoundError if no POS has this ID"""
        raise NotImplementedError
    
    def upsert(self, pos: Pos) -> Pos:
        """
        Create (id is None) or update a POS
        
        Assigns ID and timestamps, raises DuplicatePosNameError if
        another POS already uses the name.
        """
        raise NotImplementedError


class InMemoryPosRepository(PosRepository):
    """Keeps POS in a dict, IDs assigned sequentially from 1"""
    
    def __init__(self):
        self._items: Dict[int, Pos] = {}
        self._next_id = 1
        self._lock = threading.Lock()
    
    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._next_id = 1
    
    def get_all(self) -> List[Pos]:
        with self._lock:
            return [pos.model_copy() for pos in self._items.values()]
    
    def get_by_id(self, pos_id: int) -> Pos:
        with self._lock:
            if pos_id not in self._items:
                raise PosNotFoundError(pos_id)
            return self._items[pos_id].model_copy()
    
    def upsert(self, pos: Pos) -> Pos:
        now = datetime.now(timezone.utc)
        with self._lock:
            for existing in self._items.values():
                if existing.name == pos.name and existing.id != pos.id:
                    raise DuplicatePosNameError(pos.name)
            
            if pos.id is None:
                stored = pos.model_copy(update={
                    "id": self._next_id,
                    "created_at": now,
                    "updated_at": now,
                })
                self._next_id += 1
            else:
                if pos.id not in self._items:
                    raise PosNotFoundError(pos.id)
                stored = pos.model_copy(update={
                    "created_at": self._items[pos.id].created_at,
                    "updated_at": now,
                })
            
            self._items[stored.id] = stored
            return stored.model_copy()
