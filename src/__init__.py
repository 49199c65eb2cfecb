"""Pet Photo Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless pet photo storage using AWS Lambda, local file storage, and DynamoDB"
)

__all__ = ["handlers", "core"]
