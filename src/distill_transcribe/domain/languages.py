"""Supported Amazon Transcribe batch locales."""

from enum import Enum

from distill_transcribe.exceptions import UnsupportedLanguageError


class LanguageCode(str, Enum):
    """Locale tags accepted by the transcription job service."""

    AB_GE = "ab-GE"
    AF_ZA = "af-ZA"
    AR_AE = "ar-AE"
    AR_SA = "ar-SA"
    HY_AM = "hy-AM"
    AST_ES = "ast-ES"
    AZ_AZ = "az-AZ"
    BA_RU = "ba-RU"
    EU_ES = "eu-ES"
    BE_BY = "be-BY"
    BN_IN = "bn-IN"
    BS_BA = "bs-BA"
    BG_BG = "bg-BG"
    CA_ES = "ca-ES"
    CKB_IR = "ckb-IR"
    CKB_IQ = "ckb-IQ"
    ZH_CN = "zh-CN"
    ZH_TW = "zh-TW"
    HR_HR = "hr-HR"
    CS_CZ = "cs-CZ"
    DA_DK = "da-DK"
    NL_NL = "nl-NL"
    EN_AU = "en-AU"
    EN_GB = "en-GB"
    EN_IN = "en-IN"
    EN_IE = "en-IE"
    EN_NZ = "en-NZ"
    EN_AB = "en-AB"
    EN_ZA = "en-ZA"
    EN_US = "en-US"
    EN_WL = "en-WL"
    ET_ET = "et-ET"
    FA_IR = "fa-IR"
    FI_FI = "fi-FI"
    FR_FR = "fr-FR"
    FR_CA = "fr-CA"
    GL_ES = "gl-ES"
    KA_GE = "ka-GE"
    DE_DE = "de-DE"
    DE_CH = "de-CH"
    EL_GR = "el-GR"
    GU_IN = "gu-IN"
    HA_NG = "ha-NG"
    HE_IL = "he-IL"
    HI_IN = "hi-IN"
    HU_HU = "hu-HU"
    IS_IS = "is-IS"
    ID_ID = "id-ID"
    IT_IT = "it-IT"
    JA_JP = "ja-JP"
    KAB_DZ = "kab-DZ"
    KN_IN = "kn-IN"
    KK_KZ = "kk-KZ"
    RW_RW = "rw-RW"
    KO_KR = "ko-KR"
    KY_KG = "ky-KG"
    LV_LV = "lv-LV"
    LT_LT = "lt-LT"
    LG_IN = "lg-IN"
    MK_MK = "mk-MK"
    MS_MY = "ms-MY"
    ML_IN = "ml-IN"
    MT_MT = "mt-MT"
    MR_IN = "mr-IN"
    MHR_RU = "mhr-RU"
    MN_MN = "mn-MN"
    NO_NO = "no-NO"
    OR_IN = "or-IN"
    PS_AF = "ps-AF"
    PL_PL = "pl-PL"
    PT_PT = "pt-PT"
    PT_BR = "pt-BR"
    PA_IN = "pa-IN"
    RO_RO = "ro-RO"
    RU_RU = "ru-RU"
    SR_RS = "sr-RS"
    SI_LK = "si-LK"
    SK_SK = "sk-SK"
    SL_SI = "sl-SI"
    SO_SO = "so-SO"
    ES_ES = "es-ES"
    ES_US = "es-US"
    SU_ID = "su-ID"
    SW_KE = "sw-KE"
    SW_BI = "sw-BI"
    SW_RW = "sw-RW"
    SW_TZ = "sw-TZ"
    SW_UG = "sw-UG"
    SV_SE = "sv-SE"
    TL_PH = "tl-PH"
    TA_IN = "ta-IN"
    TT_RU = "tt-RU"
    TE_IN = "te-IN"
    TH_TH = "th-TH"
    TR_TR = "tr-TR"
    UK_UA = "uk-UA"
    UG_CN = "ug-CN"
    UZ_UZ = "uz-UZ"
    VI_VN = "vi-VN"
    CY_WL = "cy-WL"
    WO_SN = "wo-SN"
    ZU_ZA = "zu-ZA"


_BY_TAG = {code.value: code for code in LanguageCode}


def parse_language_code(language_code: str) -> LanguageCode:
    """
    Looks up a locale tag in the supported language table.

    Args:
        language_code: A locale tag such as ``en-US``. Matching is exact.

    Returns:
        The matching LanguageCode member.

    Raises:
        UnsupportedLanguageError: If the tag is not a supported locale.
    """
    try:
        return _BY_TAG[language_code]
    except KeyError:
        raise UnsupportedLanguageError(language_code) from None
