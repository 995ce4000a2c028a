import logging
import random
import sys
import time

from tenant import TenantConfig, configure_logging, utc_timestamp

logger = logging.getLogger(__name__)

CHECK_DELAY = 0.5


def health_check(tenant=None, rng=None, sleep=None):
    """Simulated probe; always healthy, figures come from ``rng``."""
    if tenant is None:
        tenant = TenantConfig.from_env()
    if rng is None:
        rng = random.Random()
    if sleep is None:
        sleep = time.sleep

    logger.info('Running health check...')
    sleep(CHECK_DELAY)

    response_time = rng.randint(50, 149)
    report = {
        'status': 'healthy',
        'tenant': tenant.name,
        'environment': tenant.environment,
        'timestamp': utc_timestamp(),
        'checks': {
            'application': 'healthy',
            'database': 'healthy',
            'external_api': 'healthy',
            'memory_usage': f'{rng.randint(30, 79)}%',
            'response_time': f'{response_time}ms',
        },
    }

    logger.info('%s is healthy', tenant.name)
    logger.info('Response time: %dms', response_time)
    logger.info('Environment: %s', tenant.environment)
    return report


def main():
    configure_logging()
    try:
        health_check()
    except Exception:
        logger.exception('Health check failed')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
