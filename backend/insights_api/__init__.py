from flask import Flask
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

load_dotenv()


def create_app(config: Optional[Dict[str, Any]] = None):
    app = Flask(__name__)

    app.config['OPENAPI_URL'] = os.getenv('OPENAPI_URL', '/openapi.json')
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    app.logger.setLevel(app.config['LOG_LEVEL'])
    # documents are served in declaration order
    app.json.sort_keys = False

    # Assemble once; a broken manifest aborts start-up
    from .openapi import BrokenReference, get_api_document

    try:
        document = get_api_document()
    except BrokenReference as e:
        app.logger.critical('API description is inconsistent: %s', e)
        raise
    app.extensions['api_document'] = document

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    @app.route(app.config['OPENAPI_URL'])
    def openapi_spec():
        return app.extensions['api_document'].as_openapi()

    return app
