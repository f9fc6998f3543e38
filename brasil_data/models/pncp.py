"""PNCP (Portal Nacional de Contratacoes Publicas) response shapes."""

from dataclasses import dataclass, field
from typing import Optional

from brasil_data.models.base import Envelope, as_dict, as_float, as_int, as_str

SOURCE = "pncp_api"


@dataclass
class ContractPublication:
    """A procurement publication (contratacao) from PNCP."""

    sequencial_compra: Optional[int] = None
    numero_compra: Optional[str] = None
    ano_compra: Optional[int] = None
    orgao_entidade: dict = field(default_factory=dict)
    modalidade_id: Optional[int] = None
    modalidade_nome: Optional[str] = None
    situacao_compra_id: Optional[int] = None
    situacao_compra_nome: Optional[str] = None
    numero_controle_pncp: Optional[str] = None
    data_publicacao_pncp: Optional[str] = None
    data_abertura_proposta: Optional[str] = None
    data_encerramento_proposta: Optional[str] = None
    objeto_compra: Optional[str] = None
    valor_total_estimado: Optional[float] = None
    valor_total_homologado: Optional[float] = None

    @classmethod
    def from_api(cls, payload: dict) -> "ContractPublication":
        return cls(
            sequencial_compra=as_int(payload.get("sequencialCompra")),
            numero_compra=as_str(payload.get("numeroCompra")),
            ano_compra=as_int(payload.get("anoCompra")),
            orgao_entidade=as_dict(payload.get("orgaoEntidade")),
            modalidade_id=as_int(payload.get("modalidadeId")),
            modalidade_nome=as_str(payload.get("modalidadeNome")),
            situacao_compra_id=as_int(payload.get("situacaoCompraId")),
            situacao_compra_nome=as_str(payload.get("situacaoCompraNome")),
            numero_controle_pncp=as_str(payload.get("numeroControlePNCP")),
            data_publicacao_pncp=as_str(payload.get("dataPublicacaoPncp")),
            data_abertura_proposta=as_str(payload.get("dataAberturaProposta")),
            data_encerramento_proposta=as_str(payload.get("dataEncerramentoProposta")),
            objeto_compra=as_str(payload.get("objetoCompra")),
            valor_total_estimado=as_float(payload.get("valorTotalEstimado")),
            valor_total_homologado=as_float(payload.get("valorTotalHomologado")),
        )


@dataclass
class PriceRegistration:
    """A price registration record (ata de registro de preco)."""

    numero_controle_pncp: Optional[str] = None
    orgao_entidade: dict = field(default_factory=dict)
    numero_ata: Optional[str] = None
    ano_ata: Optional[int] = None
    data_publicacao_pncp: Optional[str] = None
    data_vigencia_inicio: Optional[str] = None
    data_vigencia_fim: Optional[str] = None
    objeto_ata: Optional[str] = None
    valor_total_estimado: Optional[float] = None

    @classmethod
    def from_api(cls, payload: dict) -> "PriceRegistration":
        return cls(
            numero_controle_pncp=as_str(payload.get("numeroControlePNCP")),
            orgao_entidade=as_dict(payload.get("orgaoEntidade")),
            numero_ata=as_str(payload.get("numeroAta")),
            ano_ata=as_int(payload.get("anoAta")),
            data_publicacao_pncp=as_str(payload.get("dataPublicacaoPncp")),
            data_vigencia_inicio=as_str(payload.get("dataVigenciaInicio")),
            data_vigencia_fim=as_str(payload.get("dataVigenciaFim")),
            objeto_ata=as_str(payload.get("objetoAta")),
            valor_total_estimado=as_float(payload.get("valorTotalEstimado")),
        )


@dataclass
class ContractsResponse(Envelope):
    contracts: list[ContractPublication]
    total: int
    page: int
    page_size: int
    source: str = SOURCE


@dataclass
class PriceRegistrationsResponse(Envelope):
    registrations: list[PriceRegistration]
    total: int
    page: int
    source: str = SOURCE
