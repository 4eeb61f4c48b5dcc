import concurrent.futures
import logging
import time
from typing import Callable, Dict, Optional

from django.conf import settings

from providers.base.exceptions import ProviderError, UpstreamTimeoutError
from providers.base.provider import UpstreamProvider
from providers.dummyjson.integration import DummyJSONQuoteProvider
from providers.picsum.integration import PicsumImageProvider

from .exceptions import AggregationError
from .outcome import AggregateResult, Failure, Success, TaskOutcome

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], UpstreamProvider]


def default_quote_provider() -> DummyJSONQuoteProvider:
    return DummyJSONQuoteProvider(
        url=settings.QUOTE_PROVIDER_URL,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )


def default_image_provider() -> PicsumImageProvider:
    return PicsumImageProvider(
        url=settings.IMAGE_PROVIDER_URL,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )


class Aggregator:
    """
    Fans out to the quote and image providers in parallel and joins the results.

    Each call to ``get_inspiration`` runs both leaf tasks on a fresh two-worker
    thread pool and waits for both of them, even when one fails early. A
    single outcome is then chosen: the merged result when both succeeded,
    otherwise one failure picked by ``TASKS`` order.

    The join deadline bounds the request, not the worker threads. A leaf that
    misses it is reported as timed out and abandoned; its thread only ends when
    the provider's own ``requests`` timeout fires. That timeout is a
    ``(connect, read)`` pair applied per socket operation, so an upstream that
    keeps trickling bytes can hold the abandoned thread past the deadline.
    """

    # Failure precedence: when several leaves fail, the first one listed here is reported.
    TASKS = ("quote", "image")

    def __init__(
        self,
        quote_provider: Optional[ProviderFactory] = None,
        image_provider: Optional[ProviderFactory] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            quote_provider: Callable building the quote provider for one request
            image_provider: Callable building the image provider for one request
            timeout: Seconds to wait at the join before failing unfinished leaves;
                None falls back to ``settings.AGGREGATOR_TIMEOUT_SECONDS``, and
                ``0`` waits forever.

        Raises:
            ValueError: If ``timeout`` is negative
        """
        self.quote_provider = quote_provider or default_quote_provider
        self.image_provider = image_provider or default_image_provider
        if timeout is None:
            timeout = settings.AGGREGATOR_TIMEOUT_SECONDS
        if timeout is not None and timeout < 0:
            raise ValueError(f"Aggregator timeout must not be negative, got {timeout}")
        # 0 disables the join deadline, same as AGGREGATOR_TIMEOUT_SECONDS=0
        self.timeout = timeout or None

    def fetch_quote(self) -> TaskOutcome:
        return self._run_leaf("quote", self.quote_provider)

    def fetch_image(self) -> TaskOutcome:
        return self._run_leaf("image", self.image_provider)

    def _run_leaf(self, task: str, provider_factory: ProviderFactory) -> TaskOutcome:
        start_time = time.time()
        try:
            with provider_factory() as provider:
                value = provider.fetch()
        except ProviderError as e:
            logger.warning(
                f"Leaf task '{task}' failed after {time.time() - start_time:.3f}s "
                f"[{e.error_code}]: {e}"
            )
            return Failure(e)
        except Exception as e:
            logger.exception(f"Unexpected error in leaf task '{task}': {str(e)}")
            return Failure(e)

        logger.info(f"Leaf task '{task}' succeeded in {time.time() - start_time:.3f}s")
        return Success(value)

    def collect_outcomes(self) -> Dict[str, TaskOutcome]:
        """
        Run both leaf tasks concurrently and return one outcome per task.

        A leaf still running when the join deadline passes gets a
        ``Failure(UpstreamTimeoutError)``; the pool is released without
        waiting for it.
        """
        leaves = {"quote": self.fetch_quote, "image": self.fetch_image}

        executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=len(leaves), thread_name_prefix="inspire-leaf"
        )
        try:
            futures = {task: executor.submit(fn) for task, fn in leaves.items()}
            done, not_done = concurrent.futures.wait(
                futures.values(), timeout=self.timeout
            )
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        outcomes: Dict[str, TaskOutcome] = {}
        for task, future in futures.items():
            if future in done:
                outcomes[task] = future.result()
            else:
                logger.error(f"Leaf task '{task}' did not finish within {self.timeout}s")
                outcomes[task] = Failure(UpstreamTimeoutError(
                    f"{task} task did not finish within {self.timeout}s",
                    provider=task,
                    error_code="JOIN_TIMEOUT",
                ))
        return outcomes

    def get_inspiration(self) -> AggregateResult:
        """
        Fetch a quote and an image URL concurrently and merge them.

        Raises:
            AggregationError: If either leaf task failed. When both failed, the
                quote failure is the one reported.
        """
        start_time = time.time()
        outcomes = self.collect_outcomes()

        failed = [task for task in self.TASKS if not outcomes[task].ok]
        if failed:
            surfaced = failed[0]
            logger.warning(
                f"Aggregation failed in {time.time() - start_time:.3f}s; "
                f"failed tasks: {failed}, reporting '{surfaced}'"
            )
            raise AggregationError(
                task=surfaced,
                cause=outcomes[surfaced].error,
                details={"failed_tasks": failed},
            )

        logger.info(f"Aggregation succeeded in {time.time() - start_time:.3f}s")
        return AggregateResult(
            quote=outcomes["quote"].value,
            image=outcomes["image"].value,
        )
