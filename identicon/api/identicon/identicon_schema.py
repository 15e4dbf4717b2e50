from typing import List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, Field, field_validator


class IdenticonParams(BaseModel):
    """
    Параметры запроса identicon.
    Поддерживает короткие и полные имена параметров через псевдонимы.
    """

    save: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("s", "save"),
    )

    @field_validator("save", mode="before")
    @classmethod
    def validate_boolean_params(cls, v):
        """
        Обрабатывает параметр 'y' как True.

        :param v: Входящее значение параметра.
        :return: Булево значение.
        """
        if v == "y":
            return True
        return v


class IdenticonRequest(BaseModel):
    """
    Тело запроса на генерацию и сохранение identicon.
    """

    input: str = Field(..., description="Строка, из которой строится identicon")


class IdenticonInfo(BaseModel):
    """
    Описание identicon без самого изображения.
    """

    input: str = Field(..., description="Исходная строка")
    md5: str = Field(..., description="MD5 исходной строки")
    color: Tuple[int, int, int] = Field(..., description="Цвет заливки (R, G, B)")
    cells: List[int] = Field(..., description="Индексы закрашенных клеток 0..24")
    filename: str = Field(..., description="Имя файла при сохранении")


class IdenticonSaved(BaseModel):
    """
    Результат сохранения identicon.
    """

    input: str = Field(..., description="Исходная строка")
    md5: str = Field(..., description="MD5 исходной строки")
    filename: str = Field(..., description="Имя сохраненного файла")
    path: str = Field(..., description="Путь к сохраненному файлу")
    file_size: int = Field(..., description="Размер файла в байтах")
