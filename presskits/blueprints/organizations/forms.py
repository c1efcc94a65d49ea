from flask_wtf import FlaskForm
from wtforms import StringField
from wtforms.validators import DataRequired, Optional, Length

class UpsertOrganizationForm(FlaskForm):
    org_id = StringField("Organization reference", validators=[DataRequired(), Length(max=255)])
    name = StringField("Name", validators=[Optional(), Length(max=255)])
