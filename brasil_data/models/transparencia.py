"""Portal da Transparencia response shapes."""

from dataclasses import dataclass
from typing import Optional

from brasil_data.models.base import Envelope, as_float, as_int, as_str

SOURCE = "portal_transparencia_api"


@dataclass
class Contract:
    """A federal government contract."""

    id: Optional[int] = None
    numero: Optional[str] = None
    objeto: Optional[str] = None
    numero_processo: Optional[str] = None
    fundamento_legal: Optional[str] = None
    data_assinatura: Optional[str] = None
    data_vigencia_inicio: Optional[str] = None
    data_vigencia_fim: Optional[str] = None
    valor_inicial: Optional[float] = None
    situacao: Optional[str] = None
    modalidade_compra: Optional[str] = None
    codigo_orgao: Optional[str] = None
    nome_orgao: Optional[str] = None
    cnpj_fornecedor: Optional[str] = None
    nome_fornecedor: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Contract":
        return cls(
            id=as_int(payload.get("id")),
            numero=as_str(payload.get("numero")),
            objeto=as_str(payload.get("objeto")),
            numero_processo=as_str(payload.get("numeroProcesso")),
            fundamento_legal=as_str(payload.get("fundamentoLegal")),
            data_assinatura=as_str(payload.get("dataAssinatura")),
            data_vigencia_inicio=as_str(payload.get("dataVigenciaInicio")),
            data_vigencia_fim=as_str(payload.get("dataVigenciaFim")),
            valor_inicial=as_float(payload.get("valorInicial")),
            situacao=as_str(payload.get("situacao")),
            modalidade_compra=as_str(payload.get("modalidadeCompra")),
            codigo_orgao=as_str(payload.get("codigoOrgao")),
            nome_orgao=as_str(payload.get("nomeOrgao")),
            cnpj_fornecedor=as_str(payload.get("cnpjFornecedor")),
            nome_fornecedor=as_str(payload.get("nomeFornecedor")),
        )


@dataclass
class Servidor:
    """A federal public servant."""

    id: Optional[int] = None
    cpf: Optional[str] = None
    nome: Optional[str] = None
    matricula: Optional[str] = None
    codigo_orgao: Optional[str] = None
    nome_orgao: Optional[str] = None
    codigo_uorg: Optional[str] = None
    nome_uorg: Optional[str] = None
    tipo_vinculo: Optional[str] = None
    situacao_vinculo: Optional[str] = None
    data_ingresso_cargo: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Servidor":
        return cls(
            id=as_int(payload.get("id")),
            cpf=as_str(payload.get("cpf")),
            nome=as_str(payload.get("nome")),
            matricula=as_str(payload.get("matricula")),
            codigo_orgao=as_str(payload.get("codigoOrgaoLotacao")),
            nome_orgao=as_str(payload.get("nomeOrgaoLotacao")),
            codigo_uorg=as_str(payload.get("codigoUorgLotacao")),
            nome_uorg=as_str(payload.get("nomeUorgLotacao")),
            tipo_vinculo=as_str(payload.get("tipoVinculo")),
            situacao_vinculo=as_str(payload.get("situacaoVinculo")),
            data_ingresso_cargo=as_str(payload.get("dataIngressoCargo")),
        )


@dataclass
class Remuneracao:
    """Monthly pay of a public servant."""

    mes_ano: Optional[str] = None
    remuneracao_basica_bruta: Optional[float] = None
    abate_gratificacao: Optional[float] = None
    gratificacao_natalina: Optional[float] = None
    abate_teto: Optional[float] = None
    rendimento_liquido: Optional[float] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Remuneracao":
        return cls(
            mes_ano=as_str(payload.get("mesAno")),
            remuneracao_basica_bruta=as_float(payload.get("remuneracaoBasicaBruta")),
            abate_gratificacao=as_float(payload.get("abateGratificacao")),
            gratificacao_natalina=as_float(payload.get("gratificacaoNatalina")),
            abate_teto=as_float(payload.get("abateTeto")),
            rendimento_liquido=as_float(payload.get("rendimentoLiquido")),
        )


@dataclass
class Convenio:
    """A federal agreement (convenio) with a state or municipality."""

    numero: Optional[str] = None
    objeto: Optional[str] = None
    situacao: Optional[str] = None
    valor_liberado: Optional[float] = None
    valor_convenio: Optional[float] = None
    uf: Optional[str] = None
    municipio: Optional[str] = None
    orgao_superior: Optional[str] = None
    data_inicio_vigencia: Optional[str] = None
    data_fim_vigencia: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Convenio":
        return cls(
            numero=as_str(payload.get("numero")),
            objeto=as_str(payload.get("objeto")),
            situacao=as_str(payload.get("situacaoConvenio")),
            valor_liberado=as_float(payload.get("valorLiberado")),
            valor_convenio=as_float(payload.get("valorConvenio")),
            uf=as_str(payload.get("uf")),
            municipio=as_str(payload.get("municipio")),
            orgao_superior=as_str(payload.get("orgaoSuperior")),
            data_inicio_vigencia=as_str(payload.get("dataInicioVigencia")),
            data_fim_vigencia=as_str(payload.get("dataFimVigencia")),
        )


@dataclass
class SanctionedCompany:
    """An entry of CEIS (Cadastro de Empresas Inidoneas e Suspensas)."""

    cnpj: Optional[str] = None
    razao_social: Optional[str] = None
    nome_fantasia: Optional[str] = None
    tipo_sancao: Optional[str] = None
    data_inicio_sancao: Optional[str] = None
    data_fim_sancao: Optional[str] = None
    orgao_sancionador: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "SanctionedCompany":
        return cls(
            cnpj=as_str(payload.get("cnpjSancionado")),
            razao_social=as_str(payload.get("razaoSocialSancionado")),
            nome_fantasia=as_str(payload.get("nomeFantasia")),
            tipo_sancao=as_str(payload.get("tipoSancao")),
            data_inicio_sancao=as_str(payload.get("dataInicioSancao")),
            data_fim_sancao=as_str(payload.get("dataFimSancao")),
            orgao_sancionador=as_str(payload.get("orgaoSancionador")),
        )


@dataclass
class ContractsResponse(Envelope):
    contracts: list[Contract]
    total: int
    page: int
    page_size: int
    orgao_code: str
    orgao_name: str
    source: str = SOURCE


@dataclass
class ServidoresResponse(Envelope):
    servidores: list[Servidor]
    total: int
    page: int
    page_size: int
    source: str = SOURCE


@dataclass
class RemuneracaoResponse(Envelope):
    cpf: str
    remuneracao: list[Remuneracao]
    mes_ano: str
    source: str = SOURCE


@dataclass
class ConveniosResponse(Envelope):
    convenios: list[Convenio]
    total: int
    page: int
    page_size: int
    uf: str
    source: str = SOURCE


@dataclass
class CEISResponse(Envelope):
    empresas: list[SanctionedCompany]
    total: int
    page: int
    page_size: int
    source: str = SOURCE
