"""
Changed-files Orchestrator（核心流程编排）。

5 阶段 pipeline（线性执行，任一阶段失败即终止）：
- Step 1: 校验 format
- Step 2: 解析事件 -> base/head -> compare request
- Step 3: 调用 compare API 并校验（唯一的网络调用）
- Step 4: filter + classify
- Step 5: format 并写 output

失败策略：
- 各阶段只 raise，这里统一捕获并 set_failed 一次
- 失败时不写任何 output；成功时所有 output 全部算完才开始写
"""

from __future__ import annotations

import logging

from changed_files.actions.core import OutputSink
from changed_files.errors import ChangedFilesError
from changed_files.errors import UnexpectedError
from changed_files.github.adapter import build_trigger_event
from changed_files.github.client import CommitComparer
from changed_files.pipeline.classifier import classify_files
from changed_files.pipeline.classifier import filter_files
from changed_files.pipeline.formatter import build_outputs
from changed_files.pipeline.gateway import fetch_changed_files
from changed_files.pipeline.models import ActionContext
from changed_files.pipeline.models import RunOptions
from changed_files.pipeline.resolver import resolve_compare_request
from changed_files.pipeline.validator import validate_format

logger = logging.getLogger(__name__)

_OUTPUT_LABELS: dict[str, str] = {
    "all": "All",
    "added": "Added",
    "modified": "Modified",
    "removed": "Removed",
    "renamed": "Renamed",
    "added_modified": "Added or modified",
}


async def compute_outputs(context: ActionContext, comparer: CommitComparer, options: RunOptions) -> dict[str, str]:
    """跑 Step 1~5 的计算部分，返回全部 output；任何失败直接抛出。"""
    fmt = validate_format(options.format)

    logger.debug(f"Payload keys: {','.join(context.payload.keys())}")
    event = build_trigger_event(event_name=context.event_name, payload=context.payload)
    request = resolve_compare_request(event=event, repo=context.repo)

    files = await fetch_changed_files(comparer=comparer, request=request, event_name=context.event_name)
    files = filter_files(files=files, filter=options.filter)
    result = classify_files(files=files, fmt=fmt)

    outputs = build_outputs(result=result, fmt=fmt)
    for key, label in _OUTPUT_LABELS.items():
        logger.info(f"{label}: {outputs[key]}")
    return outputs


async def run_changed_files(
    context: ActionContext,
    comparer: CommitComparer,
    options: RunOptions,
    sink: OutputSink,
) -> bool:
    """
    action 的完整一次运行。

    - 成功：写 7 个 output，返回 True
    - 失败：只调用一次 sink.set_failed，返回 False（写 output 失败同样走这里）
    """
    try:
        outputs = await compute_outputs(context=context, comparer=comparer, options=options)
        for name, value in outputs.items():
            sink.set_output(name, value)
    except ChangedFilesError as exc:
        sink.set_failed(str(exc))
        return False
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        sink.set_failed(str(UnexpectedError.from_exception(exc)))
        return False
    return True
