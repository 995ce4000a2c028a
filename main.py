import logging
import os
import random

from flask import Flask, jsonify

from tenant import TenantConfig, configure_logging, utc_timestamp

logger = logging.getLogger(__name__)


def create_app(tenant=None, rng=None):
    if tenant is None:
        tenant = TenantConfig.from_env()
    if rng is None:
        rng = random.Random()

    app = Flask(__name__)
    app.config['TENANT'] = tenant

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            'status': 'healthy',
            'timestamp': utc_timestamp(),
            'tenant': tenant.name,
            'environment': tenant.environment,
            'version': tenant.version,
        })

    @app.route('/', methods=['GET'])
    def index():
        return jsonify({
            'message': f'Hello from {tenant.name}!',
            'tenant': tenant.to_dict(),
            'deployedAt': utc_timestamp(),
        })

    @app.route('/config', methods=['GET'])
    def config():
        return jsonify({
            'tenant': tenant.to_dict(),
            'features': tenant.features(),
        })

    @app.route('/data', methods=['GET'])
    def data():
        # synthetic figures, different on every call
        return jsonify({
            'tenant': tenant.name,
            'users': rng.randint(100, 1099),
            'requests': rng.randint(1000, 10999),
            'uptime': f'{rng.randint(1, 30)} days',
            'lastDeployment': utc_timestamp(),
        })

    return app


def get_port(environ=None):
    if environ is None:
        environ = os.environ
    return int(environ.get('PORT') or 3000)


app = create_app()

if __name__ == '__main__':
    configure_logging()
    port = get_port()
    tenant = app.config['TENANT']
    logger.info('%s running on port %d', tenant.name, port)
    logger.info('Environment: %s', tenant.environment)
    logger.info('Region: %s', tenant.region)
    app.run(host='0.0.0.0', port=port)
