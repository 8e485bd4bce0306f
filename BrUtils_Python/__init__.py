"""
BrUtils - helpers for Brazilian-locale text, numbers and documents (CPF/CNPJ).

Every helper lives as a static method on a ``*Utils`` class under ``utils``;
the names below are the public pt-BR aliases.
"""
from .downloaders.blob_reader import BlobReadError, BlobReader
from .exporters.clipboard_client import ClipboardClient
from .utils.array_utils import ArrayUtils
from .utils.async_utils import delay
from .utils.cnpj_utils import CnpjUtils
from .utils.contact_utils import ContactUtils
from .utils.cpf_utils import CpfUtils
from .utils.document_utils import DocumentUtils
from .utils.encoding_utils import EncodingUtils
from .utils.file_utils import FileUtils
from .utils.name_utils import NameUtils
from .utils.number_utils import NumberUtils
from .utils.text_utils import TextUtils

# Documentos
validar_cpf = CpfUtils.is_valid
validar_cnpj = CnpjUtils.is_valid
formatar_cpf = CpfUtils.format
formatar_cnpj = CnpjUtils.format
formatar_cpf_cnpj = DocumentUtils.format

# Texto
extrair_numeros = TextUtils.extract_digits
remover_numeros = TextUtils.remove_digits
remover_acentos = TextUtils.remove_accents
remover_espacos_repetidos = TextUtils.remove_repeated_spaces
limpar_texto = TextUtils.clean_text

# Contato
formatar_cep = ContactUtils.format_cep
formatar_telefone = ContactUtils.format_phone
validar_email = ContactUtils.is_valid_email

# Nomes
encurtar_nome = NameUtils.shorten
nome_siglas = NameUtils.initials
reduzir_nome = NameUtils.reduce

# Números
formatar_numero = NumberUtils.format_number
tamanho_humanizado = NumberUtils.human_size

# Listas
ordenar_array_de_objetos = ArrayUtils.sort_by_property
possui_itens_duplicados = ArrayUtils.has_duplicates
possui_objetos_duplicados = ArrayUtils.has_duplicate_objects
remover_itens_duplicados = ArrayUtils.remove_duplicates
remover_objetos_duplicados = ArrayUtils.remove_duplicate_objects

# Arquivos
extrair_nome_arquivo = FileUtils.file_name
extrair_extensao_arquivo = FileUtils.extension
remover_extensao = FileUtils.remove_extension

# Codificação
base64_decode = EncodingUtils.base64_decode
jwt_payload = EncodingUtils.jwt_payload
jwt_check = EncodingUtils.jwt_check

# Interop assíncrono
converte_blob_pra_string = BlobReader.to_binary_string_async
converte_blob_pra_base64 = BlobReader.to_data_url_async
copiar_texto_para_area_transferencia = ClipboardClient.copy_text_async

__all__ = [
    "ArrayUtils", "BlobReadError", "BlobReader", "ClipboardClient", "CnpjUtils",
    "ContactUtils", "CpfUtils", "DocumentUtils", "EncodingUtils", "FileUtils",
    "NameUtils", "NumberUtils", "TextUtils",
    "validar_cpf", "validar_cnpj", "formatar_cpf", "formatar_cnpj", "formatar_cpf_cnpj",
    "extrair_numeros", "remover_numeros", "remover_acentos", "remover_espacos_repetidos",
    "limpar_texto", "formatar_cep", "formatar_telefone", "validar_email",
    "encurtar_nome", "nome_siglas", "reduzir_nome", "formatar_numero", "tamanho_humanizado",
    "ordenar_array_de_objetos", "possui_itens_duplicados", "possui_objetos_duplicados",
    "remover_itens_duplicados", "remover_objetos_duplicados", "extrair_nome_arquivo",
    "extrair_extensao_arquivo", "remover_extensao", "base64_decode", "jwt_payload",
    "jwt_check", "converte_blob_pra_string", "converte_blob_pra_base64",
    "copiar_texto_para_area_transferencia", "delay",
]
