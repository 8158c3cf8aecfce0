"""표준화된 로거 모듈.

`configure_logging()`이 루트 로거를 구성한 경우 그 설정을 그대로 따르고,
스크립트나 테스트처럼 구성 전에 호출된 경우에만 stdout 핸들러를 붙입니다.
"""

import logging
import sys

FALLBACK_HANDLER_NAME = "app-fallback-stdout"
_FALLBACK_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """모듈 단위 로거를 반환합니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용).

    Returns:
        설정된 로거 인스턴스.
    """
    logger = logging.getLogger(name)

    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(FALLBACK_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FALLBACK_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger


def detach_fallback_handlers() -> None:
    """`get_logger`가 붙인 임시 핸들러를 떼고 루트 로거로 전파되게 되돌립니다."""
    for logger in logging.root.manager.loggerDict.values():
        if not isinstance(logger, logging.Logger):
            continue
        fallback = [handler for handler in logger.handlers if handler.get_name() == FALLBACK_HANDLER_NAME]
        for handler in fallback:
            logger.removeHandler(handler)
        if fallback:
            logger.propagate = True
            logger.setLevel(logging.NOTSET)
