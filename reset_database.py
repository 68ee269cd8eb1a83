import logging

from config import setup_logging
from db import get_db, Base, engine
from models import User, ProgressEntry, UserStats, TrainingPlan
from tracker import seed_training_plans

logger = logging.getLogger(__name__)


def reset_all():
    with get_db() as db:
        # children first to avoid FK errors
        db.query(ProgressEntry).delete()
        db.query(UserStats).delete()
        db.query(User).delete()
        db.query(TrainingPlan).delete()
        db.commit()
        seeded = seed_training_plans(db)

    logger.info("All records deleted, %d training plans reseeded.", seeded)
    return seeded

if __name__ == "__main__":
    setup_logging()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    reset_all()
