from aws_cdk import aws_apigateway as apigw
from constructs import Construct

ALLOW_HEADERS = ['Content-Type', 'X-Amz-Date', 'Authorization', 'X-Api-Key', 'X-Amz-Security-Token']
ALLOW_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']


# ---------- helper: add default 4XX/5XX with CORS ----------
def add_default_gateway_cors(api: apigw.RestApi, scope: Construct) -> None:
    four_xx = apigw.ResponseType.DEFAULT_4_XX
    five_xx = apigw.ResponseType.DEFAULT_5_XX
    for rtype, rid in [(four_xx, "Default4xxWithCors"), (five_xx, "Default5xxWithCors")]:
        apigw.GatewayResponse(
            scope, rid,
            rest_api=api,
            type=rtype,
            response_headers={
                "Access-Control-Allow-Origin": "'*'",
                "Access-Control-Allow-Headers": "'" + ",".join(ALLOW_HEADERS) + "'",
                "Access-Control-Allow-Methods": "'" + ",".join(ALLOW_METHODS) + "'",
            },
            templates={"application/json": '{"error":$context.error.messageString}'}
        )


class GamocracyApi(Construct):
    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id)

        self.records_api = apigw.RestApi(
            self, 'RecordsApi',
            rest_api_name='Gamocracy Api',
            deploy_options=apigw.StageOptions(
                throttling_rate_limit=50,
                throttling_burst_limit=100
            )
        )

        add_default_gateway_cors(self.records_api, self)


class GamocracyApiResources(Construct):
    """
    Wires the /blogs and /posts endpoints.
    Expects in kwargs:
      - api
      - blog_handler, post_handler
    """
    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id)

        api: GamocracyApi = kwargs['api']

        self.blogs = self.add_records_resource(api, 'blogs', 'blogId', kwargs['blog_handler'])
        self.posts = self.add_records_resource(api, 'posts', 'postId', kwargs['post_handler'])

    @staticmethod
    def add_records_resource(api, path, key_field, handler):
        resource = api.records_api.root.add_resource(path)
        resource.add_cors_preflight(
            allow_origins=apigw.Cors.ALL_ORIGINS,
            allow_methods=ALLOW_METHODS,
            allow_headers=ALLOW_HEADERS
        )

        # the handler routes on method itself, so every method shares one integration
        integration = apigw.LambdaIntegration(handler)
        key_param = {f'method.request.querystring.{key_field}': False}

        resource.add_method('GET', integration, request_parameters=key_param)
        resource.add_method('POST', integration)
        resource.add_method('PUT', integration)
        resource.add_method('DELETE', integration, request_parameters=key_param)
        return resource
