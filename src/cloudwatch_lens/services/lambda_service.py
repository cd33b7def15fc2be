"""Lambda function lister."""

from typing import List, Optional

from ..constants import LAMBDA_PAGE_SIZE
from ..models import LambdaFunction, Page
from ..observability import log_event
from ..pagination import collect_pages


def list_lambda_functions(lambda_client) -> List[LambdaFunction]:
    """
    List every Lambda function in the client's region.

    ListFunctions paginates with a Marker / NextMarker pair.

    Args:
        lambda_client: An instance of boto3.client("lambda")

    Returns:
        Functions in the order the API returns them
    """

    def fetch_page(marker: Optional[str]) -> Page:
        kwargs = {"MaxItems": LAMBDA_PAGE_SIZE}
        if marker:
            kwargs["Marker"] = marker

        response = lambda_client.list_functions(**kwargs)

        items = [
            LambdaFunction(
                name=fn["FunctionName"],
                runtime=fn.get("Runtime"),
                last_modified=fn.get("LastModified"),
                description=fn.get("Description"),
            )
            for fn in response.get("Functions", [])
            if fn.get("FunctionName")
        ]
        return Page(items=items, cursor=response.get("NextMarker"))

    functions = collect_pages(fetch_page)

    log_event("lambda_functions_listed", {"count": len(functions)})
    return functions
