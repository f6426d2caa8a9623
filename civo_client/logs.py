import logging
import logging.config


logging.getLogger('civo_client').addHandler(logging.NullHandler())


def setup_logging(level: str = 'INFO'):
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {'format': '%(asctime)s %(levelname)s %(name)s: %(message)s'},
            },
            'handlers': {
                'console': {'class': 'logging.StreamHandler', 'formatter': 'default'},
            },
            'loggers': {
                'civo_client': {'handlers': ['console'], 'level': level},
            },
        }
    )
    for name in ['aiohttp', 'aiohttp.access', 'aiohttp.client']:
        logging.getLogger(name).setLevel(logging.INFO)
