# ABOUTME: Error taxonomy for a weather query: empty input, unknown city, everything else.
# ABOUTME: Each error carries a kind tag and the pt-BR message shown to the user.


class WeatherError(Exception):
    """Base class for failures surfaced to the user by the query controller."""

    kind = "error"
    title = "Erro"
    user_message = "Erro ao buscar dados do clima. Tente novamente mais tarde."


class ValidationError(WeatherError):
    """The city input was empty; no request was made."""

    kind = "validation"
    title = "Digite uma cidade"
    user_message = "Por favor, insira o nome de uma cidade para buscar o clima."


class NotFoundError(WeatherError):
    """The provider reported that the queried city does not exist."""

    kind = "not_found"
    user_message = "Cidade não encontrada. Verifique o nome e tente novamente."

    def __init__(self, city: str):
        super().__init__(f"City not found: {city}")
        self.city = city


class TransientError(WeatherError):
    """Network, status, or parsing failure while talking to the provider."""

    kind = "transient"
