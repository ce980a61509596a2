import shutil

import pytest

# synthesizing needs the jsii node runtime
pytestmark = pytest.mark.skipif(shutil.which("node") is None, reason="node is not installed")


@pytest.fixture(scope="module")
def template():
    import aws_cdk as core
    import aws_cdk.assertions as assertions

    from src.gamocracy_stack import GamocracyStack

    app = core.App()
    stack = GamocracyStack(app, "gamocracy")
    return assertions.Template.from_stack(stack)


def test_tables_created(template):
    template.resource_count_is("AWS::DynamoDB::Table", 2)
    template.has_resource_properties("AWS::DynamoDB::Table", {
        "TableName": "GC_Blog",
        "KeySchema": [{"AttributeName": "blogId", "KeyType": "HASH"}],
        "BillingMode": "PAY_PER_REQUEST",
    })
    template.has_resource_properties("AWS::DynamoDB::Table", {
        "TableName": "GC_Post",
        "KeySchema": [{"AttributeName": "postId", "KeyType": "HASH"}],
    })


def test_functions_created(template):
    template.has_resource_properties("AWS::Lambda::Function", {
        "FunctionName": "Gamocracy-blog",
        "Handler": "gamocracy.blog.handler",
    })
    template.has_resource_properties("AWS::Lambda::Function", {
        "FunctionName": "Gamocracy-post",
        "Handler": "gamocracy.post.handler",
    })


def test_methods_wired(template):
    import aws_cdk.assertions as assertions

    for method in ("GET", "POST", "PUT", "DELETE"):
        methods = template.find_resources("AWS::ApiGateway::Method", {
            "Properties": {"HttpMethod": method}
        })
        assert len(methods) == 2, method

    template.has_resource_properties("AWS::ApiGateway::Resource", {
        "PathPart": assertions.Match.string_like_regexp("^(blogs|posts)$"),
    })
