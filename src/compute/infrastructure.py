import os

from aws_cdk import (
    aws_lambda as lambda_,
    Duration
)
from constructs import Construct

FUNCTIONS_DIR = os.path.join(os.path.dirname(__file__), 'functions')


class GamocracyCompute(Construct):
    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id)

        blog_table = kwargs['blog_table']
        post_table = kwargs['post_table']
        log_level = kwargs.get('log_level', 'INFO')

        # Both handlers ship from the same asset; only the entry point differs
        code = lambda_.Code.from_asset(FUNCTIONS_DIR, exclude=['**/__pycache__'])

        # Create a Lambda function to serve /blogs
        self.blog_handler = lambda_.Function(
            self, 'BlogLambda',
            function_name='Gamocracy-blog',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='gamocracy.blog.handler',
            code=code,
            environment={
                'TABLE_NAME': blog_table.table_name,
                'LOG_LEVEL': log_level
            },
            timeout=Duration.seconds(10),
        )

        # Grant the Lambda function read/write permissions to the table
        blog_table.grant_read_write_data(self.blog_handler)

        # Create a Lambda function to serve /posts
        self.post_handler = lambda_.Function(
            self, 'PostLambda',
            function_name='Gamocracy-post',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='gamocracy.post.handler',
            code=code,
            environment={
                'TABLE_NAME': post_table.table_name,
                'LOG_LEVEL': log_level
            },
            timeout=Duration.seconds(10),
        )

        # Grant the Lambda function read/write permissions to the table
        post_table.grant_read_write_data(self.post_handler)
