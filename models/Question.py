class Question:
    def __init__(self, author, prompt):
        self.author = author
        self.prompt = prompt

    def respond(self, answered_by, answer):
        return AnsweredQuestion(self, answered_by, answer)


class AnsweredQuestion:
    def __init__(self, question, answered_by, answer):
        self.question = question
        self.answered_by = answered_by
        self.answer = answer

    @property
    def prompt(self):
        return self.question.prompt

    @property
    def author(self):
        return self.question.author
