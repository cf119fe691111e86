# autodealer/repos/base_repo.py
from sqlalchemy.orm import Session


class BaseRepo:
    """
    Shared session handling, every repo commits its own writes
    """

    model = None

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id):
        return self.db.get(self.model, entity_id)

    def add(self, entity):
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def save(self, entity):
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity) -> None:
        self.db.delete(entity)
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def reload(self, entity):
        self.db.refresh(entity)
        return entity
