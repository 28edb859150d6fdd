"""Wire configured collaborators into the full set of tracker operations."""

from dataclasses import dataclass
from typing import Any

from tracker_bridge.batch.application.executor import ParallelExecutor
from tracker_bridge.batch.domain.observer import BatchObserver
from tracker_bridge.batch.infrastructure.observer import StructlogBatchObserver
from tracker_bridge.cache.domain.manager import CacheManager
from tracker_bridge.cache.infrastructure.in_memory import (
    InMemoryCacheManager,
    NoOpCacheManager,
)
from tracker_bridge.config.domain.cache import CacheConfig
from tracker_bridge.config.domain.config import TrackerConfig
from tracker_bridge.http.domain.client import HttpClient
from tracker_bridge.operations.application.checklists import (
    AddChecklistItemOperation,
    GetChecklistOperation,
)
from tracker_bridge.operations.application.comments import (
    AddCommentOperation,
    GetCommentsOperation,
)
from tracker_bridge.operations.application.issues import (
    CreateIssueOperation,
    GetIssuesOperation,
    UpdateIssueOperation,
)
from tracker_bridge.operations.application.links import (
    CreateLinkOperation,
    GetIssueLinksOperation,
)
from tracker_bridge.operations.application.projects import GetProjectOperation
from tracker_bridge.operations.application.queues import GetQueueOperation
from tracker_bridge.operations.application.tasks import GetTasksOperation
from tracker_bridge.operations.application.worklogs import (
    AddWorklogOperation,
    GetWorklogsOperation,
)
from tracker_bridge.operations.domain.observer import OperationObserver
from tracker_bridge.operations.infrastructure.observer import StructlogOperationObserver
from tracker_bridge.retry.application.handler import RetryHandler
from tracker_bridge.retry.domain.observer import RetryObserver
from tracker_bridge.retry.infrastructure.exponential_backoff import (
    ExponentialBackoffStrategy,
)
from tracker_bridge.retry.infrastructure.observer import StructlogRetryObserver


@dataclass(frozen=True)
class Operations:
    get_issues: GetIssuesOperation
    create_issue: CreateIssueOperation
    update_issue: UpdateIssueOperation
    get_comments: GetCommentsOperation
    add_comment: AddCommentOperation
    get_issue_links: GetIssueLinksOperation
    create_link: CreateLinkOperation
    get_worklogs: GetWorklogsOperation
    add_worklog: AddWorklogOperation
    get_checklist: GetChecklistOperation
    add_checklist_item: AddChecklistItemOperation
    get_project: GetProjectOperation
    get_queue: GetQueueOperation
    get_tasks: GetTasksOperation


def build_cache(config: CacheConfig) -> CacheManager:
    if not config.enabled:
        return NoOpCacheManager()
    return InMemoryCacheManager(
        default_ttl_ms=config.ttl_ms, max_entries=config.max_entries
    )


def build_operations(
    config: TrackerConfig,
    http_client: HttpClient,
    cache: CacheManager | None = None,
    task_http_client: HttpClient | None = None,
    operation_observer: OperationObserver | None = None,
    batch_observer: BatchObserver | None = None,
    retry_observer: RetryObserver | None = None,
) -> Operations:
    """Build every operation around one strategy, handler, executor and cache.

    ``task_http_client`` serves task-list operations when tasks live behind a
    different API than issues; it defaults to ``http_client``. Observers
    default to the structlog implementations.
    """
    shared_cache = cache if cache is not None else build_cache(config.cache)
    retry_handler = RetryHandler(
        strategy=ExponentialBackoffStrategy.from_config(config.retry),
        observer=retry_observer or StructlogRetryObserver(),
    )
    executor = ParallelExecutor(
        config=config.batch, observer=batch_observer or StructlogBatchObserver()
    )
    observer = operation_observer or StructlogOperationObserver()

    def deps(client: HttpClient = http_client) -> dict[str, Any]:
        return {
            "http_client": client,
            "cache": shared_cache,
            "retry_handler": retry_handler,
            "executor": executor,
            "observer": observer,
            "cache_ttl_ms": config.cache.ttl_ms,
        }

    return Operations(
        get_issues=GetIssuesOperation(**deps()),
        create_issue=CreateIssueOperation(**deps()),
        update_issue=UpdateIssueOperation(**deps()),
        get_comments=GetCommentsOperation(**deps()),
        add_comment=AddCommentOperation(**deps()),
        get_issue_links=GetIssueLinksOperation(**deps()),
        create_link=CreateLinkOperation(**deps()),
        get_worklogs=GetWorklogsOperation(**deps()),
        add_worklog=AddWorklogOperation(**deps()),
        get_checklist=GetChecklistOperation(**deps()),
        add_checklist_item=AddChecklistItemOperation(**deps()),
        get_project=GetProjectOperation(**deps()),
        get_queue=GetQueueOperation(**deps()),
        get_tasks=GetTasksOperation(**deps(task_http_client or http_client)),
    )
