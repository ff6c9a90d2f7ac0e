# tests/test_model.py
from unittest.mock import patch
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from nids_dashboard.repositories.model_repository import ModelRepository
from nids_dashboard import db
from nids_dashboard.core.database import User, ROLE_ADMIN

def test_list_requires_login(client):
    response = client.get('/models')
    assert response.status_code == 401
    assert response.json['error'] == 'Unauthorized'

def test_get_requires_login(client):
    assert client.get('/models/1').status_code == 401

def test_create_requires_login(client, sample_model):
    assert client.post('/models', json=sample_model).status_code == 401

def test_viewer_can_list(viewer_client):
    response = viewer_client.get('/models')
    assert response.status_code == 200
    assert response.json == []

def test_viewer_cannot_create(viewer_client, sample_model):
    response = viewer_client.post('/models', json=sample_model)
    assert response.status_code == 403
    assert response.json['error'] == 'Forbidden - Admin access required'

def test_viewer_cannot_update_or_delete(admin_client, viewer_client, sample_model):
    model_id = admin_client.post('/models', json=sample_model).json['id']

    assert viewer_client.put(f'/models/{model_id}', json=sample_model).status_code == 403
    assert viewer_client.delete(f'/models/{model_id}').status_code == 403
    assert viewer_client.get(f'/models/{model_id}').status_code == 200

def test_admin_create_and_get(admin_client, viewer_client, sample_model):
    response = admin_client.post('/models', json=sample_model)
    assert response.status_code == 201
    created = response.json
    for name, value in sample_model.items():
        assert created[name] == value
    assert created['date_created'] == created['date_updated']

    fetched = viewer_client.get(f"/models/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json == created

def test_list_newest_first(admin_client, sample_model):
    first = admin_client.post('/models', json=sample_model).json
    second = admin_client.post('/models', json=dict(sample_model, model_name='Autoencoder')).json

    listed = admin_client.get('/models').json
    assert [m['id'] for m in listed] == [second['id'], first['id']]

def test_admin_update(admin_client, sample_model):
    created = admin_client.post('/models', json=sample_model).json

    changes = dict(sample_model, framework='PyTorch', accuracy=0.97)
    response = admin_client.put(f"/models/{created['id']}", json=changes)
    assert response.status_code == 200
    assert response.json['framework'] == 'PyTorch'
    assert response.json['accuracy'] == 0.97
    assert response.json['date_created'] == created['date_created']
    assert response.json['date_updated'] >= created['date_updated']

def test_admin_delete(admin_client, sample_model):
    created = admin_client.post('/models', json=sample_model).json

    response = admin_client.delete(f"/models/{created['id']}")
    assert response.status_code == 200
    assert response.json['message'] == 'Model deleted successfully'
    assert response.json['model']['id'] == created['id']
    assert admin_client.get(f"/models/{created['id']}").status_code == 404

def test_missing_model_returns_404(admin_client, sample_model):
    for response in (
        admin_client.get('/models/999'),
        admin_client.put('/models/999', json=sample_model),
        admin_client.delete('/models/999'),
    ):
        assert response.status_code == 404
        assert response.json['error'] == 'Model not found'

def test_metric_out_of_range_rejected(admin_client, sample_model):
    response = admin_client.post('/models', json=dict(sample_model, accuracy=1.5))
    assert response.status_code == 400
    assert response.json['error'] == 'accuracy must be a number between 0 and 1'

def test_metric_not_a_number_rejected(admin_client, sample_model):
    response = admin_client.post('/models', json=dict(sample_model, recall='high'))
    assert response.status_code == 400
    assert response.json['error'] == 'recall must be a number between 0 and 1'

def test_metric_as_string_number_accepted(admin_client, sample_model):
    response = admin_client.post('/models', json=dict(sample_model, f1_score='0.5'))
    assert response.status_code == 201
    assert response.json['f1_score'] == 0.5

def test_name_required(admin_client, sample_model):
    payload = dict(sample_model)
    del payload['model_name']
    response = admin_client.post('/models', json=payload)
    assert response.status_code == 400
    assert response.json['error'] == 'model_name is required'

def test_range_check_can_be_disabled(app, admin_client, sample_model):
    app.config['VALIDATE_METRIC_RANGE'] = False
    response = admin_client.post('/models', json=dict(sample_model, precision=3.2))
    assert response.status_code == 201
    assert response.json['precision'] == 3.2

def test_role_rechecked_each_request(app, make_user, login_as, sample_model):
    user_id = make_user('analyst@example.com')
    client = app.test_client()
    login_as(client, 'analyst@example.com')
    assert client.post('/models', json=sample_model).status_code == 403

    with app.app_context():
        db.session.get(User, user_id).role = ROLE_ADMIN
        db.session.commit()

    assert client.post('/models', json=sample_model).status_code == 201

def test_deleted_user_session_is_anonymous(app, make_user, login_as):
    user_id = make_user('gone@example.com')
    client = app.test_client()
    login_as(client, 'gone@example.com')
    assert client.get('/models').status_code == 200

    with app.app_context():
        db.session.delete(db.session.get(User, user_id))
        db.session.commit()

    assert client.get('/models').status_code == 401

def test_update_and_delete_require_login(admin_client, client, sample_model):
    model_id = admin_client.post('/models', json=sample_model).json['id']

    for response in (
        client.put(f'/models/{model_id}', json=sample_model),
        client.delete(f'/models/{model_id}'),
    ):
        assert response.status_code == 401
        assert response.json['error'] == 'Unauthorized'
    assert admin_client.get(f'/models/{model_id}').status_code == 200

def test_metric_too_large_for_float_rejected(admin_client, sample_model):
    response = admin_client.post('/models', json=dict(sample_model, accuracy=10 ** 400))
    assert response.status_code == 400
    assert response.json['error'] == 'accuracy must be a number between 0 and 1'

def test_non_string_name_rejected(admin_client, sample_model):
    response = admin_client.post('/models', json=dict(sample_model, model_name={'a': 1}))
    assert response.status_code == 400
    assert response.json['error'] == 'model_name must be a string'

    response = admin_client.post('/models', json=dict(sample_model, framework=['PyTorch']))
    assert response.status_code == 400
    assert response.json['error'] == 'framework must be a string'

def test_database_failures_map_to_500(admin_client, sample_model):
    model_id = admin_client.post('/models', json=sample_model).json['id']
    cases = (
        ('list_models', lambda: admin_client.get('/models'), 'Failed to fetch models'),
        ('get_model', lambda: admin_client.get(f'/models/{model_id}'), 'Failed to fetch model'),
        ('create_model', lambda: admin_client.post('/models', json=sample_model), 'Failed to create model'),
        ('update_model', lambda: admin_client.put(f'/models/{model_id}', json=sample_model), 'Failed to update model'),
        ('delete_model', lambda: admin_client.delete(f'/models/{model_id}'), 'Failed to delete model'),
    )
    for method, call, message in cases:
        with patch.object(ModelRepository, method, side_effect=SQLAlchemyError('db down')):
            response = call()
        assert response.status_code == 500, method
        assert response.json['error'] == message

def test_failed_commit_rolls_back(admin_client, sample_model):
    real_rollback = Session.rollback
    with patch.object(Session, 'commit', side_effect=SQLAlchemyError('db down')), \
         patch.object(Session, 'rollback', autospec=True, side_effect=real_rollback) as rollback:
        response = admin_client.post('/models', json=sample_model)

    assert response.status_code == 500
    assert response.json['error'] == 'Failed to create model'
    assert rollback.called

    # The session is usable again and nothing was persisted
    assert admin_client.get('/models').json == []
    assert admin_client.post('/models', json=sample_model).status_code == 201
