"""Strawberry schema extensions."""

import logging
import time

from strawberry.extensions import SchemaExtension

logger = logging.getLogger("blog.graphql")


class OperationLoggingExtension(SchemaExtension):
    """Log every GraphQL operation with its name, duration and error count."""

    def on_operation(self):
        start_time = time.perf_counter()
        yield
        duration_ms = (time.perf_counter() - start_time) * 1000

        execution_context = self.execution_context
        operation_name = execution_context.operation_name or "anonymous"
        result = execution_context.result
        error_count = len(result.errors) if result is not None and result.errors else 0

        log_level = logging.WARNING if error_count else logging.INFO
        logger.log(
            log_level,
            f"GraphQL {operation_name} ({duration_ms:.2f}ms, {error_count} errors)",
            extra={
                "operation_name": operation_name,
                "duration_ms": round(duration_ms, 2),
                "error_count": error_count,
            },
        )
