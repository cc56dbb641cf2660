from .api_client import RecapAPIClient, RecapAPIError, DEFAULT_BASE_URL
from .notices import Notice, NoticeBoard, NOTICE_DURATION_SECONDS
from .orchestrator import ClientOrchestrator, ActionState, DEFAULT_INSTRUCTION

__all__ = [
    'RecapAPIClient',
    'RecapAPIError',
    'DEFAULT_BASE_URL',
    'Notice',
    'NoticeBoard',
    'NOTICE_DURATION_SECONDS',
    'ClientOrchestrator',
    'ActionState',
    'DEFAULT_INSTRUCTION',
]
