import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from identicon.api.identicon.identicon_schema import (
    IdenticonInfo,
    IdenticonParams,
    IdenticonRequest,
    IdenticonSaved,
)
from identicon.config.constants import (
    IDENTICON_INFO_SUFFIX,
    IDENTICON_MEDIA_TYPE,
    IDENTICON_ROUTE_PREFIX,
    LOG_CONFIG,
)
from identicon.config.settings import settings
from identicon.modules.identicon import identicon_service
from identicon.modules.identicon.identicon_renderer import draw_image
from identicon.modules.identicon.identicon_storage import identicon_filename, save_image
from identicon.utils.request_logging import describe_input, log_request_error
from identicon.utils.session_context import bind_identicon_input

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])

identicon_router = APIRouter(prefix=IDENTICON_ROUTE_PREFIX, tags=["Identicon"])


def _save_identicon(input_text: str):
    """
    Строит identicon один раз, сохраняет его и возвращает состояние и путь к файлу.

    :param input_text: Исходная строка.
    :return: (IdenticonImage, путь к файлу, размер файла в байтах).
    """
    image = identicon_service.describe_identicon(input_text)
    path = save_image(draw_image(image), input_text, settings.output_path)
    return image, path, path.stat().st_size


@identicon_router.post("", response_model=IdenticonSaved)
async def create_identicon(body: IdenticonRequest, request: Request) -> IdenticonSaved:
    """
    Генерирует identicon и сохраняет его в директорию из настроек.

    Принимает любую строку, в том числе пустую и содержащую '/',
    которые нельзя передать в пути GET-запросов.

    :param body: Тело запроса со строкой.
    :param request: HTTP-запрос.
    :return: Информация о сохраненном файле.
    """
    bind_identicon_input(body.input)
    logger.info(f"Identicon save requested for: {describe_input(body.input)}")
    try:
        image, path, file_size = await run_in_threadpool(_save_identicon, body.input)
    except Exception as e:
        log_request_error(request, e)
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while saving the identicon.",
        )

    return IdenticonSaved(
        input=body.input,
        md5=image.digest,
        filename=path.name,
        path=str(path),
        file_size=file_size,
    )


@identicon_router.get("/{text}" + IDENTICON_INFO_SUFFIX, response_model=IdenticonInfo)
async def get_identicon_info(text: str, request: Request) -> IdenticonInfo:
    """
    Возвращает параметры identicon (цвет, закрашенные клетки) без изображения.

    Строка берется из одного сегмента пути: пустую строку и строки с '/'
    так передать нельзя, для них используется POST /identicon.

    :param text: Исходная строка.
    :param request: HTTP-запрос.
    :return: Описание identicon.
    """
    try:
        image = await run_in_threadpool(identicon_service.describe_identicon, text)
    except Exception as e:
        log_request_error(request, e)
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while processing the identicon.",
        )

    return IdenticonInfo(
        input=text,
        md5=image.digest,
        color=image.color,
        cells=list(image.indexes),
        filename=identicon_filename(text),
    )


@identicon_router.get("/{text}")
async def get_identicon(text: str, request: Request):
    """
    Возвращает identicon для строки в формате PNG.

    Строка берется из одного сегмента пути: пустую строку и строки с '/'
    так передать нельзя, для них используется POST /identicon.

    :param text: Исходная строка.
    :param request: HTTP-запрос.
    :return: Изображение PNG 250x250.
    """
    try:
        params = IdenticonParams.model_validate(dict(request.query_params))
    except ValidationError as e:
        logger.warning(f"Invalid identicon request parameters: {e}")
        error_detail = e.errors()[0]
        msg = f"Invalid value for parameter '{error_detail['loc'][0]}': {error_detail['msg']}"
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=msg)

    try:
        image_bytes = await run_in_threadpool(identicon_service.generate, text)
        if params.save:
            await run_in_threadpool(save_image, image_bytes, text, settings.output_path)
    except Exception as e:
        log_request_error(request, e)
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while processing the identicon.",
        )

    return Response(content=image_bytes, media_type=IDENTICON_MEDIA_TYPE)
