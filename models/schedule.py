"""
Schedule Model

Contains the Schedule model for the weekly meal plan.
"""

from .base import db


class Schedule(db.Model):
    """One entry per weekday: an easy and a less-easy collection."""
    day = db.Column(db.String(9), primary_key=True)  # 'Sunday' .. 'Saturday'
    easy_id = db.Column(db.Integer, nullable=False)
    less_easy_id = db.Column(db.Integer, nullable=False)
    easy = db.relationship(
        'Collection',
        primaryjoin='foreign(Schedule.easy_id) == Collection.id',
        viewonly=True,
    )
    less_easy = db.relationship(
        'Collection',
        primaryjoin='foreign(Schedule.less_easy_id) == Collection.id',
        viewonly=True,
    )

    @property
    def collection_ids(self):
        return {self.easy_id, self.less_easy_id}

    def to_dict(self):
        return {'day': self.day, 'easyId': self.easy_id, 'lessEasyId': self.less_easy_id}
