from flask_wtf import FlaskForm
from wtforms import IntegerField
from wtforms.validators import NumberRange


class CardActionForm(FlaskForm):
    """
    Payload for drink / equip / fight actions. Flask-WTF reads the JSON
    body; the API is stateless JSON so CSRF tokens are not used.
    """

    class Meta:
        csrf = False

    # Card ids start at 0, so InputRequired would reject the first card.
    # NumberRange also fails when the field is missing.
    card_id = IntegerField("Card", validators=[
        NumberRange(min=0, message="card_id must be a card id (0 or more)")
    ])
