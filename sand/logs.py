import logging

log_format = '%(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=log_format,
        force=True,
    )


__all__ = ['setup_logging']
