"""Mock deployment: walks the deployment steps and writes a JSON report."""

import json
import logging
import os
import re
import sys
import time

from tenant import TenantConfig, configure_logging, utc_timestamp

logger = logging.getLogger(__name__)

# (label, milliseconds)
STEPS = [
    ('Preparing package', 500),
    ('Uploading files', 500),
    ('Starting application', 500),
    ('Running health check', 500),
]


def _safe(value):
    # path separators would escape the reports directory
    return re.sub(r'[^\w.-]', '_', value)


def report_filename(tenant, millis):
    return f'deployment-{_safe(tenant.name)}-{_safe(tenant.environment)}-{millis}.json'


def deploy(tenant=None, reports_dir=None, steps=None, sleep=None, clock=None):
    """Run every step in order and write the deployment report.

    Any exception raised by a step aborts the remaining steps and no report
    is written. Returns the report dict; its ``path`` is not part of the
    file contents.
    """
    if tenant is None:
        tenant = TenantConfig.from_env()
    if reports_dir is None:
        reports_dir = os.environ.get('REPORTS_DIR', 'reports')
    if steps is None:
        steps = STEPS
    if sleep is None:
        sleep = time.sleep
    if clock is None:
        clock = time.time

    logger.info('Starting deployment...')
    logger.info('Deploying %s to %s (%s)', tenant.name, tenant.environment, tenant.region)

    completed = []
    for name, duration in steps:
        logger.info('%s...', name)
        sleep(duration / 1000)
        completed.append({'name': name, 'duration': duration})
        logger.info('%s complete', name)

    now = clock()
    report = {
        'tenant': tenant.name,
        'environment': tenant.environment,
        'region': tenant.region,
        'timestamp': utc_timestamp(now),
        'status': 'success',
        'version': tenant.version,
        'duration': sum(step['duration'] for step in completed),
        'steps': completed,
    }

    os.makedirs(reports_dir, exist_ok=True)
    path = os.path.join(reports_dir, report_filename(tenant, int(now * 1000)))
    with open(path, 'w') as f:
        json.dump(report, f, indent=2)

    logger.info('%s deployed successfully! Report: %s', tenant.name, path)
    return dict(report, path=path)


def main():
    configure_logging()
    try:
        deploy()
    except Exception:
        logger.exception('Deployment failed')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
