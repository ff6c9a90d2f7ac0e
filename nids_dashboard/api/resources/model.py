# nids_dashboard/api/resources/model.py
from flask_restful import Resource, reqparse
from ..middleware import admin_required, auth_required
from ...services.model_service import ModelService, METRIC_FIELDS, TEXT_FIELDS

def model_parser():
    parser = reqparse.RequestParser()
    for name in TEXT_FIELDS + METRIC_FIELDS:
        # Left untyped so ModelService.validate sees the raw JSON value
        parser.add_argument(name, type=lambda value: value, location='json')
    return parser

class ModelList(Resource):
    @auth_required
    def get(self):
        """Controller: List all model records"""
        return ModelService().list_models(), 200

    @admin_required
    def post(self):
        """Controller: Create a model record"""
        args = model_parser().parse_args()
        return ModelService().create_model(args), 201

class ModelDetail(Resource):
    @auth_required
    def get(self, model_id):
        """Controller: Get one model record"""
        return ModelService().get_model(model_id), 200

    @admin_required
    def put(self, model_id):
        """Controller: Replace a model record's fields"""
        args = model_parser().parse_args()
        return ModelService().update_model(model_id, args), 200

    @admin_required
    def delete(self, model_id):
        """Controller: Delete a model record"""
        model = ModelService().delete_model(model_id)
        return {"message": "Model deleted successfully", "model": model}, 200
