from nids_dashboard import create_app
from nids_dashboard.utils.logger import setup_logger

app = create_app()
logger = setup_logger()

if __name__ == '__main__':
    logger.info(f"Starting NIDS API Server on port {app.config['PORT']}")
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=app.config['DEBUG'])
