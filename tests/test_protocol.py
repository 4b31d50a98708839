# --------------------------------------------------------------
# File: test_protocol.py
# Description: Pruebas del intérprete de respuestas LEN/COMPLEX/KEY.
# --------------------------------------------------------------

import sys

import pytest

from trng_core.errors import ParseError
from trng_core.protocol import parse_response

KEY_HEX = "00112233445566778899aabbccddeeff" * 2


def test_parse_valid_response():
    """Comprueba que una respuesta bien formada se interprete campo a campo.

    Returns:
        None: Las aserciones revisan los tres campos.
    """
    response = parse_response(f"LEN:12,COMPLEX:4,KEY:{KEY_HEX}\r\n")
    assert response.requested_length == 12
    assert response.complexity_code == 4
    assert response.ciphertext_hex == KEY_HEX


@pytest.mark.parametrize("length,complexity", [(0, 0), (16, 5), (64, 17)])
def test_parse_then_serialize_roundtrip(length, complexity):
    """Verifica que reserializar la respuesta reproduzca la línea original.

    Args:
        length (int): Longitud de contraseña solicitada.
        complexity (int): Código de complejidad.

    Returns:
        None: Se comparan la línea y la tupla reconstruidas.
    """
    line = f"LEN:{length},COMPLEX:{complexity},KEY:{KEY_HEX}"
    response = parse_response(line)
    assert response.to_wire() == line
    again = parse_response(response.to_wire())
    assert (again.requested_length, again.complexity_code, again.ciphertext_hex) == (
        length,
        complexity,
        KEY_HEX,
    )


@pytest.mark.parametrize(
    "text,fragment",
    [
        ("LEN:5,COMPLEX:2", "2 parts"),
        ("LEN:5,COMPLEX:2,KEY:ab,EXTRA:1", "4 parts"),
        ("", "1 parts"),
        ("LENGTH:5,COMPLEX:2,KEY:ab", "missing LEN"),
        ("LEN:5,COMPLEXITY2,KEY:ab", "missing COMPLEX"),
        ("LEN:5,COMPLEX:2,K:ab", "missing KEY"),
        ("LEN:five,COMPLEX:2,KEY:ab", "invalid LEN"),
        ("LEN:-1,COMPLEX:2,KEY:ab", "invalid LEN"),
        ("LEN:,COMPLEX:2,KEY:ab", "invalid LEN"),
        ("LEN:5,COMPLEX:x,KEY:ab", "invalid COMPLEX"),
        ("LEN:5,COMPLEX: 2,KEY:ab", "invalid COMPLEX"),
        ("LEN:99999999999999999999,COMPLEX:0,KEY:ab", "invalid LEN"),
        ("LEN:" + "9" * 5000 + ",COMPLEX:0,KEY:ab", "invalid LEN"),
        ("LEN:5,COMPLEX:99999999999999999999,KEY:ab", "invalid COMPLEX"),
    ],
)
def test_parse_rejects_malformed(text, fragment):
    """Comprueba que cada violación del formato falle con un mensaje descriptivo.

    Args:
        text (str): Respuesta malformada.
        fragment (str): Fragmento esperado en el mensaje de error.

    Returns:
        None: Se espera una excepción ParseError.
    """
    with pytest.raises(ParseError) as excinfo:
        parse_response(text)
    assert fragment in str(excinfo.value)


def test_parse_keeps_key_verbatim():
    """Garantiza que el campo KEY no se valide en esta capa.

    Returns:
        None: El valor se devuelve tal cual aunque no sea hexadecimal.
    """
    assert parse_response("LEN:1,COMPLEX:0,KEY:zz").ciphertext_hex == "zz"


def test_parse_accepts_largest_platform_length():
    """Comprueba que el mayor tamaño representable se acepte, con o sin ceros a la izquierda.

    Returns:
        None: El valor se interpreta sin pérdida.
    """
    assert parse_response(f"LEN:{sys.maxsize},COMPLEX:0,KEY:ab").requested_length == sys.maxsize
    assert parse_response("LEN:" + "0" * 30 + "7,COMPLEX:0,KEY:ab").requested_length == 7
