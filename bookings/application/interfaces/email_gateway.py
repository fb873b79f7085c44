class EmailGateway:
    async def send(self, to: str, subject: str, html_body: str) -> None:
        """
        Envía un email HTML.

        Raises:
            EmailDeliveryError: si el transporte falla.
        """
        raise NotImplementedError
