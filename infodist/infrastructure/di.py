from typing import Optional

from injector import Injector, Module, provider, singleton

from ..application.use_cases.distance_matrix import DistanceMatrixUseCase
from ..domain.ports.compressor_port import CompressorPort
from ..domain.services.normalized_compression_distance import (
    NormalizedCompressionDistance,
)
from .container import Container, ContainerConfig


class DistanceModule(Module):

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._container = Container(config)

    @property
    def config(self) -> ContainerConfig:
        return self._container.config

    @singleton
    @provider
    def provide_compressor(self) -> CompressorPort:
        return self._container.compressor

    @singleton
    @provider
    def provide_distance(
        self, compressor: CompressorPort
    ) -> NormalizedCompressionDistance:
        return NormalizedCompressionDistance(compressor)

    @singleton
    @provider
    def provide_distance_matrix_use_case(
        self, distance: NormalizedCompressionDistance
    ) -> DistanceMatrixUseCase:
        return DistanceMatrixUseCase(
            distance=distance,
            max_workers=self.config.distance.max_workers,
        )


class AppInjector:

    _instance: "AppInjector | None" = None

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._module = DistanceModule(config)
        self._injector = Injector([self._module])

    @classmethod
    def get_instance(
        cls, config: Optional[ContainerConfig] = None
    ) -> "AppInjector":
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def get(self, cls: type) -> object:
        return self._injector.get(cls)

    def get_distance(self) -> NormalizedCompressionDistance:
        return self._injector.get(NormalizedCompressionDistance)


__all__ = ["AppInjector", "DistanceModule"]
