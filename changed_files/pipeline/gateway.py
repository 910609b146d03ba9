"""
Comparison Gateway：调用一次 compare API 并校验结果。

- 不重试、不翻页（只取 CompareRequest 指定的那一页）
- status code 必须是 200，且 head 必须 ahead of base
"""

from __future__ import annotations

import json
import logging

from changed_files.errors import NotAheadError
from changed_files.errors import UpstreamStatusError
from changed_files.github.adapter import build_changed_files
from changed_files.github.client import CommitComparer
from changed_files.pipeline.models import ChangedFile
from changed_files.pipeline.models import CompareRequest

logger = logging.getLogger(__name__)

EXPECTED_STATUS_CODE = 200


async def fetch_changed_files(comparer: CommitComparer, request: CompareRequest, event_name: str) -> list[ChangedFile]:
    logger.debug(f"Compare Payload {json.dumps(request.model_dump(), indent=4)}")

    response = await comparer.compare_commits(
        owner=request.owner,
        repo=request.repo,
        basehead=request.basehead,
        per_page=request.per_page,
        page=request.page,
    )
    if response.status_code != EXPECTED_STATUS_CODE:
        raise UpstreamStatusError(
            event_name=event_name,
            status_code=response.status_code,
            expected=EXPECTED_STATUS_CODE,
        )
    if response.data.status != "ahead":
        raise NotAheadError(event_name=event_name, status=response.data.status)

    return build_changed_files(response.data.files)
