"""
生成状态轮询
按固定间隔查询异步生成任务的状态，直到完成、失败或超过最大查询次数
"""

import asyncio
from typing import Awaitable, Callable

import httpx

from dreamlab.core.log_utils import get_logger
from dreamlab.core.log_messages import log_messages
from dreamlab.utils.datetime_utils import format_duration
from .exceptions import GenerationFailedError, GenerationTimeoutError, ProviderPollError
from .models import DEFAULT_FAILURE_REASON, GenerationResult, GenerationState

logger = get_logger(__name__)

FetchStatus = Callable[[str], Awaitable[GenerationResult]]
SleepFunc = Callable[[float], Awaitable[None]]

DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_MAX_ATTEMPTS = 60


class GenerationPoller:
    """生成状态轮询器"""

    # 轮询过程中可重试的错误，其余异常直接向上抛出
    TRANSIENT_ERRORS = (ProviderPollError, httpx.HTTPError)

    def __init__(
        self,
        fetch_status: FetchStatus,
        interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        sleep: SleepFunc = asyncio.sleep
    ):
        """
        初始化轮询器

        Args:
            fetch_status: 单次状态查询函数
            interval: 两次查询之间的间隔（秒）
            max_attempts: 最大查询次数
            sleep: 等待函数，测试中可注入记录调用的假实现
        """
        if max_attempts < 1:
            raise ValueError("max_attempts必须大于等于1")
        if interval < 0:
            raise ValueError("interval不能为负数")

        self.fetch_status = fetch_status
        self.interval = interval
        self.max_attempts = max_attempts
        self.sleep = sleep

    @property
    def timeout_description(self) -> str:
        """轮询总时长的描述，如 "5 minutes" """
        return format_duration(self.interval * self.max_attempts)

    async def poll(self, generation_id: str) -> GenerationResult:
        """
        轮询直到生成结束

        Args:
            generation_id: 生成ID

        Returns:
            GenerationResult: completed状态的结果

        Raises:
            GenerationFailedError: 提供商报告生成失败
            GenerationTimeoutError: 超过最大查询次数仍未结束
            ProviderPollError: 最后一次查询失败
        """
        for attempt in range(1, self.max_attempts + 1):
            logger.debug(
                log_messages.POLL_ATTEMPT,
                generation_id=generation_id,
                attempt=attempt,
                max_attempts=self.max_attempts
            )

            try:
                result = await self.fetch_status(generation_id)
            except self.TRANSIENT_ERRORS as e:
                if attempt >= self.max_attempts:
                    raise
                logger.warning(
                    log_messages.POLL_TRANSIENT_ERROR,
                    operation="poll_generation",
                    generation_id=generation_id,
                    attempt=attempt,
                    error=str(e)
                )
                await self.sleep(self.interval)
                continue

            if result.state == GenerationState.COMPLETED:
                logger.info(
                    log_messages.GENERATION_COMPLETED,
                    operation="poll_generation",
                    generation_id=generation_id,
                    attempts=attempt
                )
                return result

            if result.state == GenerationState.FAILED:
                reason = result.failure_reason or DEFAULT_FAILURE_REASON
                logger.warning(
                    log_messages.GENERATION_FAILED,
                    operation="poll_generation",
                    generation_id=generation_id,
                    failure_reason=reason
                )
                raise GenerationFailedError(reason, generation_id=generation_id)

            if attempt < self.max_attempts:
                await self.sleep(self.interval)

        logger.error(
            log_messages.POLL_TIMEOUT,
            operation="poll_generation",
            generation_id=generation_id,
            attempts=self.max_attempts
        )
        raise GenerationTimeoutError(
            f"Generation timed out after {self.timeout_description}",
            generation_id=generation_id,
            attempts=self.max_attempts
        )
