"""Minha Receita (CNPJ registry) response shapes."""

from dataclasses import dataclass, field
from typing import Optional

from brasil_data.models.base import Envelope, as_dict, as_float, as_int, as_list, as_str

SOURCE = "minhareceita_api"


@dataclass
class Partner:
    """A member of the company's partner board (QSA)."""

    nome_socio: Optional[str] = None
    cpf_representante_legal: Optional[str] = None
    nome_representante_legal: Optional[str] = None
    qualificacao_socio: Optional[str] = None
    data_entrada_sociedade: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Partner":
        return cls(
            nome_socio=as_str(payload.get("nome_socio")),
            cpf_representante_legal=as_str(payload.get("cpf_representante_legal")),
            nome_representante_legal=as_str(payload.get("nome_representante_legal")),
            qualificacao_socio=as_str(payload.get("qualificacao_socio")),
            data_entrada_sociedade=as_str(payload.get("data_entrada_sociedade")),
        )


@dataclass
class CNPJData(Envelope):
    """Company registration record. Doubles as the response envelope."""

    cnpj: Optional[str] = None
    razao_social: Optional[str] = None
    nome_fantasia: Optional[str] = None
    situacao_cadastral: Optional[int] = None
    descricao_situacao_cadastral: Optional[str] = None
    data_situacao_cadastral: Optional[str] = None
    atividade_principal: dict = field(default_factory=dict)
    atividades_secundarias: list[dict] = field(default_factory=list)
    natureza_juridica: Optional[str] = None
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    municipio: Optional[str] = None
    uf: Optional[str] = None
    cep: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[str] = None
    data_abertura: Optional[str] = None
    capital_social: Optional[float] = None
    qsa: list[Partner] = field(default_factory=list)
    source: str = SOURCE

    @classmethod
    def from_api(cls, payload: dict) -> "CNPJData":
        # Minha Receita spells the opening date "data_inicio_atividade"
        opened = payload.get("data_abertura") or payload.get("data_inicio_atividade")
        telefone = payload.get("telefone") or payload.get("ddd_telefone_1")
        return cls(
            cnpj=as_str(payload.get("cnpj")),
            razao_social=as_str(payload.get("razao_social")),
            nome_fantasia=as_str(payload.get("nome_fantasia")),
            situacao_cadastral=as_int(payload.get("situacao_cadastral")),
            descricao_situacao_cadastral=as_str(payload.get("descricao_situacao_cadastral")),
            data_situacao_cadastral=as_str(payload.get("data_situacao_cadastral")),
            atividade_principal=as_dict(payload.get("atividade_principal")),
            atividades_secundarias=[
                a for a in as_list(payload.get("atividades_secundarias"))
                if isinstance(a, dict)
            ],
            natureza_juridica=as_str(payload.get("natureza_juridica")),
            logradouro=as_str(payload.get("logradouro")),
            numero=as_str(payload.get("numero")),
            complemento=as_str(payload.get("complemento")),
            bairro=as_str(payload.get("bairro")),
            municipio=as_str(payload.get("municipio")),
            uf=as_str(payload.get("uf")),
            cep=as_str(payload.get("cep")),
            email=as_str(payload.get("email")),
            telefone=as_str(telefone),
            data_abertura=as_str(opened),
            capital_social=as_float(payload.get("capital_social")),
            qsa=[
                Partner.from_api(p) for p in as_list(payload.get("qsa"))
                if isinstance(p, dict)
            ],
        )
