"""Waste rule repository - Database operations for weekly pickup rules"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import WasteScheduleRule


class WasteRuleRepository:
    @staticmethod
    def get_rules(db: Session, area: Optional[str] = None) -> list[WasteScheduleRule]:
        query = db.query(WasteScheduleRule)
        if area:
            query = query.filter(WasteScheduleRule.area == area)
        return query.order_by(WasteScheduleRule.area, WasteScheduleRule.day_of_week).all()

    @staticmethod
    def get_rule_by_id(db: Session, rule_id: int) -> Optional[WasteScheduleRule]:
        return db.query(WasteScheduleRule).filter(WasteScheduleRule.id == rule_id).first()

    @staticmethod
    def create_rule(db: Session, area: str, day_of_week: int) -> WasteScheduleRule:
        rule = WasteScheduleRule(area=area, day_of_week=day_of_week)
        db.add(rule)
        db.commit()
        db.refresh(rule)
        return rule

    @staticmethod
    def delete_rule(db: Session, rule: WasteScheduleRule) -> None:
        db.delete(rule)
        db.commit()
