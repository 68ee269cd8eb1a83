from sqlalchemy import Column, Integer, String, ForeignKey, Float, Date, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from db import Base


class User(Base):
    __tablename__ = 'users'

    id                  = Column(String,  primary_key=True, index=True)   # auth provider uid
    goal                = Column(String,  nullable=False)   # "bulking" / "cutting"
    weekly_availability = Column(Integer, nullable=False)
    weight_kg           = Column(Float,   nullable=False)
    height_cm           = Column(Float,   nullable=False)
    # food names picked on the Nutrition tab, empty means any food
    preferred_foods     = Column(JSON,    nullable=False, default=list)

    progress_entries = relationship("ProgressEntry", back_populates="user", cascade="all, delete-orphan")
    stats            = relationship("UserStats", back_populates="user", uselist=False, cascade="all, delete-orphan")


class ProgressEntry(Base):
    __tablename__ = 'progress_entries'
    __table_args__ = (UniqueConstraint('user_id', 'date', name='uq_progress_user_date'),)

    id               = Column(Integer, primary_key=True, index=True)
    user_id          = Column(String,  ForeignKey('users.id'), nullable=False, index=True)
    date             = Column(Date,    nullable=False)
    body_weight      = Column(Float,   nullable=False)
    plan_id          = Column(String,  nullable=False)
    plan_day_id      = Column(String,  nullable=False)
    # [{"name", "sets", "reps", "logged_sets": [{"weight", "reps", "rir"}]}]
    logged_exercises = Column(JSON,    nullable=False, default=list)

    user = relationship("User", back_populates="progress_entries")


class UserStats(Base):
    __tablename__ = 'user_stats'

    user_id            = Column(String,  ForeignKey('users.id'), primary_key=True)
    experience         = Column(Integer, nullable=False, default=0)
    level              = Column(Integer, nullable=False, default=1)   # always written from experience
    workouts_completed = Column(Integer, nullable=False, default=0)
    streak_days        = Column(Integer, nullable=False, default=0)
    bench_press        = Column(Float,   nullable=False, default=0.0)
    squat              = Column(Float,   nullable=False, default=0.0)
    deadlift           = Column(Float,   nullable=False, default=0.0)
    version            = Column(Integer, nullable=False)   # optimistic lock, bumped on every write

    user = relationship("User", back_populates="stats")

    __mapper_args__ = {"version_id_col": version}


class TrainingPlan(Base):
    __tablename__ = 'training_plans'

    id          = Column(String, primary_key=True)
    name        = Column(String, nullable=False)
    description = Column(String, nullable=False)
    # [{"id", "name", "exercises": [{"name", "sets", "reps"}]}]
    days        = Column(JSON,   nullable=False)
