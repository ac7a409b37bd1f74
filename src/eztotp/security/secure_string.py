class SecureString:
    """
    Secure String Implementation for Sensitive Data Protection

    Holds secret material such as the shared TOTP key. The value is kept in
    a mutable buffer so it can be overwritten on ``clear()``, and the string
    representations are masked so the secret cannot leak through logging or
    tracebacks.

    Key Security Features:
    - Masked ``str()`` and ``repr()``
    - Zeroization of the backing buffer on ``clear()`` and garbage collection
    - Context manager interface for controlled access
    """

    def __init__(self, value):
        """
        Initialize a new SecureString with the given sensitive value.

        Args:
            value (str or bytes): The sensitive data to store.
                Strings are encoded as UTF-8.
        """
        if isinstance(value, SecureString):
            value = value.get_value()
        if isinstance(value, str):
            value = value.encode('utf-8')
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("SecureString value must be str or bytes")
        self._buffer = bytearray(value)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.clear()

    def __del__(self):
        try:
            self.clear()
        except Exception:
            pass  # Ignore cleanup errors in destructor

    def clear(self):
        """Overwrite the stored bytes with zeros and drop them."""
        buffer = getattr(self, '_buffer', None)
        if buffer is None:
            return
        for i in range(len(buffer)):
            buffer[i] = 0
        self._buffer = None

    @property
    def cleared(self):
        return self._buffer is None

    def get_value(self):
        """
        Get the raw value as bytes. USE THIS METHOD SPARINGLY.

        Returns:
            bytes: Copy of the sensitive data

        Raises:
            ValueError: If the value has already been cleared
        """
        if self._buffer is None:
            raise ValueError("SecureString has been cleared")
        return bytes(self._buffer)

    def __len__(self):
        return 0 if self._buffer is None else len(self._buffer)

    def __str__(self):
        return "[SECURE_STRING]"

    def __repr__(self):
        return "SecureString([SECURE_STRING])"
