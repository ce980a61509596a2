from aws_cdk import (
    CfnOutput,
    Stack,
    Tags
)
from constructs import Construct
from src.api.infrastructure import GamocracyApi, GamocracyApiResources
from src.database.infrastructure import GamocracyDatabase
from src.compute.infrastructure import GamocracyCompute

class GamocracyStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Add a tag to the stack
        Tags.of(self).add('Project', 'Gamocracy')

        # Create the DynamoDB tables
        database = GamocracyDatabase(self, "GamocracyDatabase")

        # Create the API Gateway
        api = GamocracyApi(self, "GamocracyApi")

        # Create the Lambda functions
        compute = GamocracyCompute(self, "GamocracyCompute",
            blog_table = database.blog_table,
            post_table = database.post_table)

        # Attach the Lambda functions to the API Gateway
        GamocracyApiResources(self, "GamocracyApiResources",
            api = api,
            blog_handler = compute.blog_handler,
            post_handler = compute.post_handler)

        CfnOutput(self, "ApiUrl", value=api.records_api.url)
