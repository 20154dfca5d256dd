from backend.engine.questionbank.bank import QuestionBank

__all__ = ["QuestionBank"]
