"""Client repository - Database operations for clients and their plans"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Client, RecurringPlan


class ClientRepository:
    """Repository for client database operations"""

    @staticmethod
    def get_clients(db: Session) -> list[Client]:
        """Get all clients, alphabetically"""
        return db.query(Client).order_by(Client.name).all()

    @staticmethod
    def get_client_by_id(db: Session, client_id: int) -> Optional[Client]:
        """Get a specific client by ID"""
        return db.query(Client).filter(Client.id == client_id).first()

    @staticmethod
    def create_client(db: Session, **client_data) -> Client:
        """Create a new client"""
        client = Client(**client_data)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def update_client(db: Session, client: Client, **updates) -> Client:
        """Update a client with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(client, key):
                setattr(client, key, value)

        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def delete_client(db: Session, client: Client) -> None:
        """Delete a client together with its plan and visits"""
        db.delete(client)
        db.commit()

    # Recurring plan methods
    @staticmethod
    def get_plan(db: Session, client_id: int) -> Optional[RecurringPlan]:
        """Get the recurring plan for a client"""
        return db.query(RecurringPlan).filter(RecurringPlan.client_id == client_id).first()

    @staticmethod
    def upsert_plan(db: Session, client_id: int, **plan_data) -> RecurringPlan:
        """Create the client's plan or replace its fields"""
        plan = db.query(RecurringPlan).filter(RecurringPlan.client_id == client_id).first()
        if plan is None:
            plan = RecurringPlan(client_id=client_id, **plan_data)
            db.add(plan)
        else:
            for key, value in plan_data.items():
                setattr(plan, key, value)

        db.commit()
        db.refresh(plan)
        return plan
