from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Optional

class UpsertGenerationResultForm(FlaskForm):
    org_id = StringField("Organization reference", validators=[DataRequired()])
    mdx_content = TextAreaField("MDX content", validators=[DataRequired()])
    title = StringField("Title", validators=[Optional()])
    icon_url = StringField("Icon URL", validators=[Optional()])
