from enum import Enum
from typing import Optional
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from users_api.api.deps import get_user_repository
from users_api.core.errors import UserError
from users_api.db.repositories.users import UserRepository

ERROR_METHOD_NOT_ALLOWED = "Method not allowed"

router = APIRouter()


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, method: str) -> Optional["HttpMethod"]:
        try:
            return cls(method.upper())
        except ValueError:
            return None


def api_response(status_code: int, body=None) -> Response:
    if body is None:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))

def error_response(error: UserError) -> Response:
    return api_response(status.HTTP_400_BAD_REQUEST, {"error_msg": error.message})


async def get_users(request: Request, repository: UserRepository) -> Response:
    email = request.query_params.get("email", "")
    if email:
        result = await repository.fetch_user(email)
    else:
        result = await repository.fetch_users()
    return api_response(status.HTTP_200_OK, result)

async def create_user(request: Request, repository: UserRepository) -> Response:
    result = await repository.create_user(await request.body())
    return api_response(status.HTTP_201_CREATED, result)

async def update_user(request: Request, repository: UserRepository) -> Response:
    result = await repository.update_user(await request.body())
    return api_response(status.HTTP_200_OK, result)

async def delete_user(request: Request, repository: UserRepository) -> Response:
    await repository.delete_user(request.query_params.get("email", ""))
    return api_response(status.HTTP_200_OK)


HANDLERS = {
    HttpMethod.GET: get_users,
    HttpMethod.POST: create_user,
    HttpMethod.PUT: update_user,
    HttpMethod.DELETE: delete_user,
}


@router.api_route("/", methods=["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"])
async def handle_users(
    request: Request,
    repository: UserRepository = Depends(get_user_repository)
):
    """Dispatch a users request on its HTTP method"""
    method = HttpMethod.parse(request.method)
    if method is None:
        return api_response(status.HTTP_405_METHOD_NOT_ALLOWED, ERROR_METHOD_NOT_ALLOWED)

    try:
        return await HANDLERS[method](request, repository)
    except UserError as e:
        return error_response(e)
