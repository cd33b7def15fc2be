"""SQS queue lister."""

from typing import Dict, List, Optional

from ..constants import SQS_PAGE_SIZE
from ..models import Page, SqsQueue
from ..observability import log_event
from ..pagination import collect_pages

QUEUE_ATTRIBUTES = [
    "ApproximateNumberOfMessages",
    "ApproximateNumberOfMessagesNotVisible",
    "ApproximateNumberOfMessagesDelayed",
    "CreatedTimestamp",
    "QueueArn",
]


def list_sqs_queues(sqs_client) -> List[SqsQueue]:
    """
    List every SQS queue in the client's region.

    Args:
        sqs_client: An instance of boto3.client("sqs")

    Returns:
        Queues in the order the API returns them
    """

    def fetch_page(cursor: Optional[str]) -> Page:
        kwargs = {"MaxResults": SQS_PAGE_SIZE}
        if cursor:
            kwargs["NextToken"] = cursor

        response = sqs_client.list_queues(**kwargs)

        items = [SqsQueue(url=url) for url in response.get("QueueUrls", []) if url]
        return Page(items=items, cursor=response.get("NextToken"))

    queues = collect_pages(fetch_page)

    log_event("sqs_queues_listed", {"count": len(queues)})
    return queues


def get_queue_attributes(sqs_client, queue: SqsQueue) -> Dict[str, str]:
    """Get the summary attributes shown for a queue."""
    response = sqs_client.get_queue_attributes(
        QueueUrl=queue.url,
        AttributeNames=QUEUE_ATTRIBUTES,
    )
    return response.get("Attributes", {})
