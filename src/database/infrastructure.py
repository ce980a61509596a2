from aws_cdk import (
    RemovalPolicy,
    aws_dynamodb as db
)
from constructs import Construct

class GamocracyDatabase(Construct):
    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id)

        # One table per record kind, keyed by the record id
        self.blog_table = db.Table(
            self, "BlogTable",
            table_name="GC_Blog",
            partition_key=db.Attribute(name="blogId", type=db.AttributeType.STRING),
            removal_policy=RemovalPolicy.RETAIN,
            billing_mode=db.BillingMode.PAY_PER_REQUEST
        )

        self.post_table = db.Table(
            self, "PostTable",
            table_name="GC_Post",
            partition_key=db.Attribute(name="postId", type=db.AttributeType.STRING),
            removal_policy=RemovalPolicy.RETAIN,
            billing_mode=db.BillingMode.PAY_PER_REQUEST
        )
