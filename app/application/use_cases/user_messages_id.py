"""Indonesian user-facing messages for the marketplace API."""

from collections.abc import Iterable


class UserMessagesID:
    """Centralized Indonesian user-facing messages."""

    # Request format
    INVALID_REQUEST = "Format data tidak valid"

    @staticmethod
    def invalid_field_format(field: str) -> str:
        """Field with the wrong JSON type."""
        return f"Format field {field} tidak valid"

    # Registration
    REGISTER_MISSING_FIELDS = "Semua field wajib diisi"
    REGISTER_INVALID_ROLE = "Role tidak valid. Pilih CONSUMER, DEALER_SEMI, atau DEALER_OFFICIAL"
    REGISTER_NAME_TAG_REQUIRED = "Dealer wajib upload foto name tag"
    REGISTER_DEALER_BRAND_REQUIRED = "Dealer resmi wajib mengisi brand dealer"
    REGISTER_EMAIL_EXISTS = "Email sudah terdaftar"
    REGISTER_SUCCESS = "Registrasi berhasil"
    REGISTER_FAILED = "Terjadi kesalahan saat registrasi"

    @staticmethod
    def password_too_short(min_length: int) -> str:
        """Password length rule."""
        return f"Password minimal {min_length} karakter"

    # Authentication
    UNAUTHORIZED = "Unauthorized"
    LOGIN_MISSING_FIELDS = "Email dan password wajib diisi"
    LOGIN_INVALID_CREDENTIALS = "Email atau password salah"
    LOGIN_FAILED = "Terjadi kesalahan saat login"
    LOGOUT_SUCCESS = "Logout berhasil"
    LOGOUT_FAILED = "Terjadi kesalahan saat logout"
    SESSION_LOOKUP_FAILED = "Terjadi kesalahan saat memeriksa sesi"
    PROFILE_FETCH_FAILED = "Terjadi kesalahan saat mengambil data pengguna"

    # Listing creation
    LISTING_INVALID_CONDITION = "Kondisi mobil harus BARU atau BEKAS"
    LISTING_NOT_A_VEHICLE = (
        "ERROR: Barang yang Anda jual bukan kendaraan / mobil. "
        "Marketplace ini khusus untuk penjualan mobil."
    )
    LISTING_PHOTO_COUNT = (
        "Wajib upload 6 foto: Depan, Samping Kiri, Samping Kanan, Belakang, Dalam, Dashboard"
    )
    LISTING_CREATED = "Mobil berhasil ditambahkan"
    LISTING_CREATE_FAILED = "Terjadi kesalahan saat menambahkan mobil"

    @staticmethod
    def missing_listing_fields(fields: Iterable[str]) -> str:
        """Required listing fields left empty."""
        return f"Field berikut wajib diisi: {', '.join(fields)}"

    @staticmethod
    def invalid_number(field: str) -> str:
        """Numeric field that could not be parsed."""
        return f"Field {field} harus berupa angka yang valid"

    @staticmethod
    def missing_photos(positions: Iterable[str]) -> str:
        """Required photo positions not supplied."""
        return f"Foto berikut wajib diisi: {', '.join(positions)}"

    # Browsing
    LISTING_NOT_FOUND = "Mobil tidak ditemukan"
    LISTING_FETCH_FAILED = "Terjadi kesalahan saat mengambil data mobil"
    CONTACT_LINK_FAILED = "Terjadi kesalahan saat membuat link kontak"
