"""
Input validation utilities for SDK arguments (language, HTTP verbs)
"""

from typing import Tuple


SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en", "fa")
SUPPORTED_METHODS: Tuple[str, ...] = ("GET", "POST", "PUT", "DELETE")


class ValidationError(ValueError):
    """Raised when an SDK argument is invalid (before any request is sent)"""
    pass


class LanguageValidator:
    """Validator for response language codes"""
    
    @classmethod
    def validate(cls, language: str) -> str:
        """
        Validate a response language.
        
        Args:
            language: Language code ('en' or 'fa')
            
        Returns:
            Cleaned language code (lowercase, stripped)
            
        Raises:
            ValidationError: If language is not supported
        """
        if not language or not isinstance(language, str):
            raise ValidationError("Language cannot be empty")
        
        language = language.strip().lower()
        
        if language not in SUPPORTED_LANGUAGES:
            raise ValidationError(
                f"Unsupported language: {language}. "
                f"Valid options are: {', '.join(SUPPORTED_LANGUAGES)}"
            )
        
        return language


class MethodValidator:
    """Validator for HTTP verbs accepted by the transport"""
    
    @classmethod
    def validate(cls, method: str) -> str:
        if not method or not isinstance(method, str):
            raise ValidationError("HTTP method cannot be empty")
        
        method = method.strip().upper()
        
        if method not in SUPPORTED_METHODS:
            raise ValidationError(
                f"Unsupported HTTP method: {method}. "
                f"Valid options are: {', '.join(SUPPORTED_METHODS)}"
            )
        
        return method


def validate_language(language: str) -> str:
    """Convenience function for language validation"""
    return LanguageValidator.validate(language)


def validate_method(method: str) -> str:
    """Convenience function for HTTP method validation"""
    return MethodValidator.validate(method)
