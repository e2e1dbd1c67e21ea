"""Prometheus metrics for the Mallu Card API."""

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest


class Metrics:
    """Prometheus metrics collection."""

    def __init__(self):
        # Request metrics
        self.request_count = Counter(
            'mallu_api_requests_total',
            'Total number of API requests',
            ['method', 'endpoint', 'status']
        )

        self.request_duration = Histogram(
            'mallu_api_request_duration_seconds',
            'Request duration in seconds',
            ['method', 'endpoint']
        )

        # Classification metrics
        self.classifications = Counter(
            'mallu_api_classifications_total',
            'Address histories classified',
            ['tier']
        )

        self.addresses_per_request = Histogram(
            'mallu_api_addresses_per_request',
            'Number of addresses submitted per verification',
            buckets=(1, 2, 3, 5, 10, 20, 50)
        )

        self.rejected_requests = Counter(
            'mallu_api_rejected_requests_total',
            'Verification requests rejected at the boundary',
            ['reason']
        )

        self.rate_limited_requests = Counter(
            'mallu_api_rate_limited_requests_total',
            'Requests refused by the rate limiter'
        )


# Global metrics instance
metrics = Metrics()


def setup_metrics(app: FastAPI, path: str = "/metrics"):
    """Setup metrics endpoint."""

    @app.get(path, include_in_schema=False)
    async def get_metrics():
        """Prometheus metrics endpoint."""
        return Response(
            content=generate_latest(),
            media_type=CONTENT_TYPE_LATEST
        )
