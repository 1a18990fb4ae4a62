from fastapi import APIRouter, Depends, Request, Response

from catalogo.services.gateway_proxy import GatewayProxy

router = APIRouter()

gateway_proxy = GatewayProxy()


def get_gateway_proxy() -> GatewayProxy:
    return gateway_proxy


@router.api_route(
    "/api/{rest:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
    include_in_schema=False,
)
async def proxy(request: Request, proxy: GatewayProxy = Depends(get_gateway_proxy)):
    """
    Forwards everything under /api to the service that owns the prefix.
    """
    resp = await proxy.forward(
        method=request.method,
        path=request.url.path,
        query=request.url.query,
        headers=request.headers,
        body=await request.body(),
    )
    response = Response(content=resp.content, status_code=resp.status_code)
    for name, value in GatewayProxy.response_headers(resp):
        response.headers.append(name, value)
    return response
