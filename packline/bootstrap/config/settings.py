from typing import Annotated

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from packline.bootstrap.config.loader import get_configfile
from packline.core.models.options import Alphabet, CompressionLevel, FormatKind, Options


class CodecSettings(BaseModel):
    format: Annotated[
        FormatKind,
        Field(
            description=(
                "Wire format used to serialize records.\n"
                "One of: plain_text (JSON), compact_binary_map (MessagePack),\n"
                "self_describing_document (BSON).\n"
                "Encoder and decoder must agree on it: it is not recorded in the output."
            ),
            default=FormatKind.PLAIN_TEXT
        )
    ]


class CompressionSettings(BaseModel):
    level: Annotated[
        int,
        Field(
            description=(
                "gzip compression level.\n"
                "0 stores data uncompressed, 1 is fastest, 6 is the default, 9 is best."
            ),
            default=CompressionLevel.DEFAULT,
            ge=CompressionLevel.NONE.value,
            le=CompressionLevel.BEST.value
        )
    ]


class TextSettings(BaseModel):
    alphabet: Annotated[
        Alphabet,
        Field(
            description=(
                "Base64 variant of the encoded text.\n"
                "standard uses '+/' with '=' padding, url_safe uses '-_' without padding.\n"
                "The same alphabet is used to encode and to decode."
            ),
            default=Alphabet.STANDARD
        )
    ]


class WorkerSettings(BaseModel):
    max_workers: Annotated[
        int,
        Field(
            description="Number of threads available to run pipeline calls off the caller's thread.",
            default=4,
            ge=1
        )
    ]


class PacklineConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PACKLINE_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    codec: Annotated[
        CodecSettings,
        Field(
            description="Serialization settings.",
            default_factory=CodecSettings
        )
    ]

    compression: Annotated[
        CompressionSettings,
        Field(
            description="Compression settings.",
            default_factory=CompressionSettings
        )
    ]

    text: Annotated[
        TextSettings,
        Field(
            description="Text encoding settings.",
            default_factory=TextSettings
        )
    ]

    worker: Annotated[
        WorkerSettings,
        Field(
            description="Background worker settings used by the host bridge.",
            default_factory=WorkerSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        configfile = get_configfile()
        if configfile is None:
            return init_settings, env_settings

        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=configfile),
        )

    def to_options(self) -> Options:
        return Options(
            format=self.codec.format,
            level=self.compression.level,
            alphabet=self.text.alphabet,
        )
