# nids_dashboard/repositories/model_repository.py
from datetime import datetime
from ..core.database import ModelRecord
from .. import db
from ..utils.logger import setup_logger

class ModelRepository:
    def __init__(self):
        self.logger = setup_logger()

    def list_models(self):
        """Repository: All model records, newest first"""
        try:
            return ModelRecord.query.order_by(
                ModelRecord.date_created.desc(), ModelRecord.id.desc()
            ).all()
        except Exception as e:
            self.logger.error(f"Repository: Error listing models: {str(e)}")
            raise

    def get_model(self, model_id):
        """Repository: Get a model record by ID"""
        try:
            return db.session.get(ModelRecord, model_id)
        except Exception as e:
            self.logger.error(f"Repository: Error getting model {model_id}: {str(e)}")
            raise

    def create_model(self, fields):
        """Repository: Insert a model record"""
        try:
            now = datetime.utcnow()
            record = ModelRecord(date_created=now, date_updated=now, **fields)
            db.session.add(record)
            db.session.commit()
            self.logger.info(f"Repository: Created model {record.id} ({record.model_name})")
            return record
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Error creating model: {str(e)}")
            raise

    def update_model(self, model_id, fields):
        """Repository: Overwrite a model record; None if it does not exist"""
        try:
            record = db.session.get(ModelRecord, model_id)
            if record is None:
                return None
            for name, value in fields.items():
                setattr(record, name, value)
            record.date_updated = datetime.utcnow()
            db.session.commit()
            self.logger.info(f"Repository: Updated model {model_id}")
            return record
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Error updating model {model_id}: {str(e)}")
            raise

    def delete_model(self, model_id):
        """Repository: Delete a model record; returns its last state or None"""
        try:
            record = db.session.get(ModelRecord, model_id)
            if record is None:
                return None
            snapshot = record.to_dict()
            db.session.delete(record)
            db.session.commit()
            self.logger.info(f"Repository: Deleted model {model_id}")
            return snapshot
        except Exception as e:
            db.session.rollback()
            self.logger.error(f"Repository: Error deleting model {model_id}: {str(e)}")
            raise
