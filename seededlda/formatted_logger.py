import logging

_levels = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARN,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


def formatted_logger(label, level=None, format=None, date_format=None, file_path=None):
    """ Return the logger `label` with a stream handler (and a file handler when `file_path` is given)

    Calling it again for the same label reuses the handlers attached by the first call.
    """
    log = logging.getLogger(label)
    if level is None:
        level = logging.INFO
    else:
        level = _levels[level.lower()]
    log.setLevel(level)

    if getattr(log, '_seededlda_configured', False):
        return log

    if format is None:
        format = '%(asctime)s %(levelname)s:%(name)s:%(message)s'
    if date_format is None:
        date_format = '%Y-%m-%d %H:%M:%S'

    formatter = logging.Formatter(format, date_format)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    log.addHandler(stream_handler)
    if file_path is not None:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)
    log._seededlda_configured = True
    return log
