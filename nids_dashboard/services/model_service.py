# nids_dashboard/services/model_service.py
import math
from flask import current_app
from ..repositories.model_repository import ModelRepository
from ..utils.exceptions import APIError
from ..utils.logger import setup_logger

METRIC_FIELDS = ('accuracy', 'precision', 'recall', 'f1_score')
TEXT_FIELDS = ('model_name', 'framework')

class ModelService:
    def __init__(self):
        self.repository = ModelRepository()
        self.logger = setup_logger()

    def validate(self, payload):
        """Service: Normalise a create/update payload into column values.

        Text fields must be non-empty strings; metrics must parse as finite numbers and,
        when VALIDATE_METRIC_RANGE is on, lie in [0, 1].
        """
        fields = {}
        for name in TEXT_FIELDS:
            value = payload.get(name)
            if value is not None and not isinstance(value, str):
                raise APIError(f"{name} must be a string", status_code=400)
            if not value or not value.strip():
                raise APIError(f"{name} is required", status_code=400)
            fields[name] = value.strip()

        check_range = current_app.config.get('VALIDATE_METRIC_RANGE', True)
        for name in METRIC_FIELDS:
            value = payload.get(name)
            try:
                number = float(value)
            except (TypeError, ValueError, OverflowError):
                number = math.nan
            if math.isnan(number) or math.isinf(number) or isinstance(value, bool):
                raise APIError(f"{name} must be a number between 0 and 1", status_code=400)
            if check_range and not 0 <= number <= 1:
                raise APIError(f"{name} must be a number between 0 and 1", status_code=400)
            fields[name] = number
        return fields

    def list_models(self):
        """Service: List all model records"""
        try:
            models = self.repository.list_models()
            self.logger.info(f"Service: Listed {len(models)} models")
            return [m.to_dict() for m in models]
        except Exception as e:
            self.logger.error(f"Service: Failed to list models: {str(e)}")
            raise APIError("Failed to fetch models", status_code=500)

    def get_model(self, model_id):
        try:
            record = self.repository.get_model(model_id)
        except Exception as e:
            self.logger.error(f"Service: Failed to get model {model_id}: {str(e)}")
            raise APIError("Failed to fetch model", status_code=500)
        if record is None:
            raise APIError("Model not found", status_code=404)
        return record.to_dict()

    def create_model(self, payload):
        fields = self.validate(payload)
        try:
            record = self.repository.create_model(fields)
            self.logger.info(f"Service: Created model {record.id}")
            return record.to_dict()
        except Exception as e:
            self.logger.error(f"Service: Failed to create model: {str(e)}")
            raise APIError("Failed to create model", status_code=500)

    def update_model(self, model_id, payload):
        fields = self.validate(payload)
        try:
            record = self.repository.update_model(model_id, fields)
        except Exception as e:
            self.logger.error(f"Service: Failed to update model {model_id}: {str(e)}")
            raise APIError("Failed to update model", status_code=500)
        if record is None:
            raise APIError("Model not found", status_code=404)
        self.logger.info(f"Service: Updated model {model_id}")
        return record.to_dict()

    def delete_model(self, model_id):
        try:
            snapshot = self.repository.delete_model(model_id)
        except Exception as e:
            self.logger.error(f"Service: Failed to delete model {model_id}: {str(e)}")
            raise APIError("Failed to delete model", status_code=500)
        if snapshot is None:
            raise APIError("Model not found", status_code=404)
        self.logger.info(f"Service: Deleted model {model_id}")
        return snapshot
