import logging, os, sys
def setup_logging(cfg):
    log_cfg = cfg.get('logging', {})
    level = getattr(logging, str(log_cfg.get('level', 'INFO')).upper(), logging.INFO)
    if log_cfg.get('json'):
        # read by drive_api.log_event
        os.environ['DRIVE_LOG_JSON'] = '1'
    # stdout carries the table output
    logging.basicConfig(level=level, stream=sys.stderr, format='%(message)s')
